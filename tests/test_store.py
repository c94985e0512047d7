"""Tests for the UID reservation stores."""

import os
import stat

import pytest
from loguru import logger

from slotnet.exceptions import NotReservedError, StorageError
from slotnet.store import DirectoryReservationStore


class TestReservationStore:
    def test_claim_is_exclusive(self, store):
        assert store.claim(5) is True
        assert store.claim(5) is False
        assert store.is_reserved(5)

    def test_release_makes_uid_claimable(self, store):
        store.claim(5)
        store.release(5)
        assert not store.is_reserved(5)
        assert store.claim(5) is True

    def test_release_unknown_uid(self, store):
        with pytest.raises(NotReservedError) as exc_info:
            store.release(42)
        assert exc_info.value.uid == 42

    def test_double_release_is_an_error(self, store):
        store.claim(3)
        store.release(3)
        with pytest.raises(NotReservedError):
            store.release(3)

    def test_reserved_is_sorted(self, store):
        for uid in (9, 1, 4):
            store.claim(uid)
        assert store.reserved() == [1, 4, 9]


class TestDirectoryReservationStore:
    def test_creates_owner_only_directory(self, tmp_path):
        path = tmp_path / "work" / "uids"
        DirectoryReservationStore(str(path))

        assert path.is_dir()
        assert stat.S_IMODE(path.stat().st_mode) & 0o077 == 0

    def test_marker_is_empty_owner_only_file(self, tmp_path):
        store = DirectoryReservationStore(str(tmp_path))
        store.claim(3001)

        marker = tmp_path / "3001"
        assert marker.is_file()
        assert marker.stat().st_size == 0
        assert stat.S_IMODE(marker.stat().st_mode) & 0o077 == 0

    def test_existing_markers_are_seen(self, tmp_path):
        (tmp_path / "17").touch()
        store = DirectoryReservationStore(str(tmp_path))

        assert store.claim(17) is False
        assert store.reserved() == [17]

    def test_shared_directory_between_instances(self, tmp_path):
        first = DirectoryReservationStore(str(tmp_path))
        second = DirectoryReservationStore(str(tmp_path))

        assert first.claim(8) is True
        assert second.claim(8) is False
        second.release(8)
        assert not first.is_reserved(8)

    def test_reserved_ignores_foreign_files(self, tmp_path):
        store = DirectoryReservationStore(str(tmp_path))
        store.claim(2)
        (tmp_path / ".2.swp").touch()
        (tmp_path / "notes").touch()
        (tmp_path / "12").mkdir()
        (tmp_path / "\u00b2").touch()
        (tmp_path / "007").touch()

        assert store.reserved() == [2]
        assert not store.is_reserved(7)

    def test_directory_path_is_a_file(self, tmp_path):
        blocker = tmp_path / "uids"
        blocker.touch()
        with pytest.raises(StorageError) as exc_info:
            DirectoryReservationStore(str(blocker))
        assert exc_info.value.path == str(blocker)

    def test_claim_in_removed_directory_is_not_contention(self, tmp_path):
        path = tmp_path / "uids"
        store = DirectoryReservationStore(str(path))
        os.rmdir(path)

        with pytest.raises(StorageError) as exc_info:
            store.claim(1)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_list_removed_directory(self, tmp_path):
        path = tmp_path / "uids"
        store = DirectoryReservationStore(str(path))
        os.rmdir(path)

        with pytest.raises(StorageError):
            store.reserved()

    def test_location(self, tmp_path):
        store = DirectoryReservationStore(str(tmp_path))
        assert store.location == str(tmp_path)
        assert repr(store) == f"DirectoryReservationStore({str(tmp_path)!r})"

    def test_storage_faults_are_logged(self, tmp_path):
        messages = []
        logger.add(messages.append, level="ERROR", format="{message}")

        path = tmp_path / "uids"
        store = DirectoryReservationStore(str(path))
        os.rmdir(path)
        with pytest.raises(StorageError):
            store.claim(1)

        blocker = tmp_path / "blocker"
        blocker.touch()
        with pytest.raises(StorageError):
            DirectoryReservationStore(str(blocker))

        assert any("Failed to create marker" in m for m in messages)
        assert any("Failed to create reservation directory" in m for m in messages)

import os

import pytest

from hms.exceptions import RecordFormatError, RecordNotFoundError, StorageError
from hms.storage.patient_store import PatientStore


@pytest.fixture
def store(tmp_path):
    return PatientStore(str(tmp_path / 'patients.txt'))


def read(store):
    with open(store.path, 'rb') as f:
        return f.read()


def test_absent_file_is_empty_store(store):
    assert store.load_all() == []
    assert store.next_id() == 1
    assert not os.path.exists(store.path)


def test_append_and_load_preserve_order(store, make_patient):
    for patient_id in (3, 1, 2):
        store.append(make_patient(patient_id, f'P{patient_id}'))
    assert [p.id for p in store.load_all()] == [3, 1, 2]


def test_blank_lines_are_ignored(store, make_patient):
    with open(store.path, 'w') as f:
        f.write('\n1|Jane Doe|30|F|1 Main St|5551234|\n\n   \n2|Bob|40|M|2 Main St|5559999|Flu\n')
    assert [p.name for p in store.load_all()] == ['Jane Doe', 'Bob']


def test_next_id_exceeds_every_existing_id(store, make_patient):
    for patient_id in (4, 9, 2):
        store.append(make_patient(patient_id))
    assert store.next_id() == 10


def test_find_by_id(store, make_patient):
    store.append(make_patient(1, 'Jane Doe'))
    store.append(make_patient(2, 'John Roe'))
    assert store.find_by_id(2).name == 'John Roe'
    with pytest.raises(RecordNotFoundError):
        store.find_by_id(5)


def test_update_replaces_matching_record(store, make_patient):
    store.append(make_patient(1))
    store.append(make_patient(2, 'John Roe'))
    store.update_by_id(make_patient(2, 'John Roe', diagnosis='Asthma'))
    assert store.find_by_id(2).diagnosis == 'Asthma'
    assert store.find_by_id(1).diagnosis == ''


def test_delete_keeps_relative_order(store, make_patient):
    for patient_id in (1, 2, 3):
        store.append(make_patient(patient_id))
    store.delete_by_id(2)
    assert [p.id for p in store.load_all()] == [1, 3]


@pytest.mark.parametrize('operation', ['update', 'delete'])
def test_not_found_leaves_file_byte_for_byte_unchanged(store, make_patient, operation):
    store.append(make_patient(1))
    with open(store.path, 'a') as f:
        f.write('\n')
    before = read(store)

    with pytest.raises(RecordNotFoundError):
        if operation == 'update':
            store.update_by_id(make_patient(99))
        else:
            store.delete_by_id(99)

    assert read(store) == before


def test_ids_stay_unique_across_operations(store, make_patient):
    for _ in range(3):
        store.append(make_patient(store.next_id()))
    store.delete_by_id(2)
    store.append(make_patient(store.next_id()))
    store.update_by_id(make_patient(4, diagnosis='Flu'))

    ids = [p.id for p in store.load_all()]
    assert ids == [1, 3, 4]
    assert len(ids) == len(set(ids))


def test_rewrite_leaves_no_temporary_files(store, make_patient, tmp_path):
    store.append(make_patient(1))
    store.append(make_patient(2))
    store.delete_by_id(1)
    assert sorted(os.listdir(tmp_path)) == ['patients.txt']


def test_corrupt_line_reports_its_line_number(store):
    with open(store.path, 'w') as f:
        f.write('1|Jane Doe|30|F|1 Main St|5551234|\n2|Bad | Name|40|M|x|1|\n')
    with pytest.raises(RecordFormatError) as excinfo:
        store.load_all()
    assert excinfo.value.line_number == 2


def test_unreadable_path_raises_storage_error(tmp_path):
    store = PatientStore(str(tmp_path))  # a directory, not a file
    with pytest.raises(StorageError):
        store.load_all()


def test_failed_replace_keeps_old_contents(store, make_patient, tmp_path, monkeypatch):
    for patient_id in (1, 2, 3):
        store.append(make_patient(patient_id))
    before = read(store)

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, 'replace', fail_replace)
    with pytest.raises(StorageError):
        store.delete_by_id(2)

    assert read(store) == before
    assert not [name for name in os.listdir(tmp_path) if name.startswith('.tmp-')]


def test_failed_fdopen_closes_descriptor(store, make_patient, tmp_path, monkeypatch):
    store.append(make_patient(1))
    closed = []
    real_close = os.close

    def fail_fdopen(fd, *args, **kwargs):
        raise OSError("cannot open")

    def record_close(fd):
        closed.append(fd)
        real_close(fd)

    monkeypatch.setattr(os, 'fdopen', fail_fdopen)
    monkeypatch.setattr(os, 'close', record_close)
    with pytest.raises(StorageError):
        store.update_by_id(make_patient(1, diagnosis='Flu'))

    assert closed
    assert store.find_by_id(1).diagnosis == ''
    assert not [name for name in os.listdir(tmp_path) if name.startswith('.tmp-')]

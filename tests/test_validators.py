import pytest

from cms.models import FilenameCheck
from cms.utils.validators import duplicate_name, has_valid_extension, validate_filename


@pytest.mark.parametrize('existing', [[], ['a.txt'], ['']])
def test_empty_name_always_reported_first(existing):
    assert validate_filename('', existing) is FilenameCheck.EMPTY_NAME


@pytest.mark.parametrize('filename', ['some_file', 'notes.doc', 'readme.md.bak', 'txt', 'report.TXT'])
def test_invalid_extension(filename):
    assert validate_filename(filename, []) is FilenameCheck.INVALID_EXTENSION


def test_extension_checked_before_uniqueness():
    assert validate_filename('some_file', ['some_file']) is FilenameCheck.INVALID_EXTENSION


@pytest.mark.parametrize('filename', ['about.md', 'changes.txt'])
def test_duplicate_name_rejected(filename):
    assert validate_filename(filename, ['about.md', 'changes.txt']) is FilenameCheck.DUPLICATE_NAME


def test_uniqueness_is_case_sensitive():
    assert validate_filename('About.md', ['about.md']) is FilenameCheck.OK


def test_valid_name():
    check = validate_filename('history.md', ['about.md'])
    assert check is FilenameCheck.OK
    assert check.ok
    assert check.message is None


def test_failure_messages():
    assert FilenameCheck.EMPTY_NAME.message == 'A name is required.'
    assert FilenameCheck.INVALID_EXTENSION.message == 'File must have a .txt or .md extension.'
    assert FilenameCheck.DUPLICATE_NAME.message == 'Filename already used. Please choose a new filename.'
    assert not FilenameCheck.DUPLICATE_NAME.ok


def test_has_valid_extension_custom_suffixes():
    assert has_valid_extension('page.rst', ('.rst',))
    assert not has_valid_extension('page.md', ('.rst',))


@pytest.mark.parametrize('filename, expected', [
    ('report.txt', 'reportcopy.txt'),
    ('about.md', 'aboutcopy.md'),
    ('archive.tar.md', 'archive.tarcopy.md'),
    ('README', 'READMEcopy'),
    ('.hidden', '.hiddencopy'),
])
def test_duplicate_name_inserts_suffix(filename, expected):
    assert duplicate_name(filename) == expected

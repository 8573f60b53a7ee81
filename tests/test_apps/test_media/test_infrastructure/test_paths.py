"""Tests for media path helpers."""

from types import SimpleNamespace

import pytest

from server.apps.media.infrastructure.paths import (
    basename,
    build_disk_path,
    disk_path,
    split_basename,
    split_path,
    strip_known_extension,
)


def _location(directory: str, filename: str = 'report', extension: str = 'pdf'):
    return SimpleNamespace(
        directory=directory,
        filename=filename,
        extension=extension,
    )


class TestBasename:
    """Tests for basename function."""

    def test_joins_filename_and_extension(self):
        """Test basename is filename plus extension."""
        assert basename(_location('docs')) == 'report.pdf'

    def test_keeps_dots_in_filename(self):
        """Test dots inside filename are preserved."""
        assert basename(_location('', 'archive.tar', 'gz')) == 'archive.tar.gz'


class TestDiskPath:
    """Tests for disk_path function."""

    @pytest.mark.parametrize(('directory', 'expected'), [
        ('docs', 'docs/report.pdf'),
        ('docs/2024', 'docs/2024/report.pdf'),
        ('', 'report.pdf'),
        ('/', 'report.pdf'),
        ('/docs/', 'docs/report.pdf'),
        ('docs//', 'docs/report.pdf'),
    ])
    def test_single_separator_no_leading_slash(self, directory, expected):
        """Test disk path has one separator and no leading slash."""
        result = disk_path(_location(directory))

        assert result == expected
        assert not result.startswith('/')
        assert '//' not in result

    def test_build_disk_path_matches_record(self):
        """Test build_disk_path gives the same path as a record would."""
        assert build_disk_path('docs', 'report', 'pdf') == 'docs/report.pdf'
        assert build_disk_path('', 'report', 'pdf') == 'report.pdf'


class TestStripKnownExtension:
    """Tests for strip_known_extension function."""

    def test_strips_matching_extension(self):
        """Test trailing extension is removed."""
        assert strip_known_extension('photo.jpg', 'jpg') == 'photo'

    def test_keeps_name_without_extension(self):
        """Test name without suffix is unchanged."""
        assert strip_known_extension('photo', 'jpg') == 'photo'

    def test_strips_only_one_suffix(self):
        """Test only the last suffix is removed."""
        assert strip_known_extension('photo.jpg.jpg', 'jpg') == 'photo.jpg'

    def test_is_case_sensitive(self):
        """Test suffix with different case is kept."""
        assert strip_known_extension('photo.JPG', 'jpg') == 'photo.JPG'

    def test_other_extension_is_kept(self):
        """Test a different extension is treated as part of the name."""
        assert strip_known_extension('photo.png', 'jpg') == 'photo.png'

    def test_requires_dot_before_extension(self):
        """Test names merely ending with extension letters are kept."""
        assert strip_known_extension('photojpg', 'jpg') == 'photojpg'

    @pytest.mark.parametrize(('candidate', 'expected'), [
        ('zdjęcie.jpg', 'zdjęcie'),
        ('写真.jpg', '写真'),
        ('żółw', 'żółw'),
    ])
    def test_multibyte_names(self, candidate, expected):
        """Test multi-byte names are cut at the right position."""
        assert strip_known_extension(candidate, 'jpg') == expected

    def test_multibyte_extension(self):
        """Test multi-byte extension is stripped."""
        assert strip_known_extension('plik.żółć', 'żółć') == 'plik'


class TestSplitPath:
    """Tests for split_path and split_basename functions."""

    def test_split_nested_path(self):
        """Test path is split into directory, filename, extension."""
        assert split_path('docs/2024/report.pdf') == ('docs/2024', 'report', 'pdf')

    def test_split_root_path(self):
        """Test file at disk root has empty directory."""
        assert split_path('report.pdf') == ('', 'report', 'pdf')

    def test_split_strips_slashes(self):
        """Test leading slash is ignored."""
        assert split_path('/docs/report.pdf') == ('docs', 'report', 'pdf')

    def test_split_basename_uses_last_dot(self):
        """Test only the last dot separates the extension."""
        assert split_basename('archive.tar.gz') == ('archive.tar', 'gz')

    def test_split_basename_without_extension(self):
        """Test name without dot has empty extension."""
        assert split_basename('README') == ('README', '')

    def test_split_basename_hidden_file(self):
        """Test leading dot is not an extension separator."""
        assert split_basename('.env') == ('.env', '')

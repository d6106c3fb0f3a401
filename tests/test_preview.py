"""
Test preview format resolution and Pillow decoding.
"""

import logging
from pathlib import Path

import pytest

from phototriage.constants import PROGRAM
from phototriage.preview import PhotoPreviewer, PreviewFormat


class TestPreviewFormat:

    @pytest.mark.parametrize("name, expected", [
        ("photo.png", PreviewFormat.PNG),
        ("photo.PNG", PreviewFormat.PNG),
        ("photo.jpg", PreviewFormat.JPEG),
        ("photo.JPG", PreviewFormat.JPEG),
        ("photo.jpeg", PreviewFormat.JPEG),
        ("photo.JpEg", PreviewFormat.JPEG),
        ("photo.gif", PreviewFormat.UNSUPPORTED),
        ("photo.heic", PreviewFormat.UNSUPPORTED),
        ("photo.jpg.txt", PreviewFormat.UNSUPPORTED),
        ("README", PreviewFormat.UNSUPPORTED),
    ])
    def test_from_path(self, name, expected):
        assert PreviewFormat.from_path(Path(name)) is expected


class TestPhotoPreviewer:

    def test_shows_png(self, create_test_files, shown_images):
        source = create_test_files([{'name': 'pic.png', 'image': 'PNG'}])

        assert PhotoPreviewer().show(source / "pic.png", PreviewFormat.PNG)
        assert shown_images == ["pic.png"]

    def test_shows_jpeg(self, create_test_files, shown_images):
        source = create_test_files([{'name': 'pic.jpeg', 'image': 'JPEG'}])

        assert PhotoPreviewer().show(source / "pic.jpeg", PreviewFormat.JPEG)
        assert shown_images == ["pic.jpeg"]

    def test_corrupt_image_warns(self, create_test_files, shown_images, caplog):
        source = create_test_files([{'name': 'broken.jpg', 'content': b'not really a jpeg'}])

        with caplog.at_level(logging.WARNING, logger=PROGRAM):
            assert not PhotoPreviewer().show(source / "broken.jpg", PreviewFormat.JPEG)

        assert shown_images == []
        assert "Could not decode broken.jpg" in caplog.text

    def test_decoder_matches_format(self, create_test_files, shown_images):
        # A PNG named .jpg is not decoded as JPEG
        source = create_test_files([{'name': 'misnamed.jpg', 'image': 'PNG'}])

        assert not PhotoPreviewer().show(source / "misnamed.jpg", PreviewFormat.JPEG)
        assert shown_images == []

    def test_unsupported_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            PhotoPreviewer().show(tmp_path / "clip.mov", PreviewFormat.UNSUPPORTED)

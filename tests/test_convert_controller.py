from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from bwstamp.controllers.convert_controller import ConvertController
from bwstamp.errors import ImageDecodeError, ImageEncodeError, ImageNotFoundError
from bwstamp.services.file_service import FileService


class _BrokenProbeFileService(FileService):
    def size_kb(self, file_path):
        return -1.0

    def modified_time(self, file_path):
        return "Unavailable"


def test_run_writes_same_size_grayscale_output(gradient_image_path):
    output = ConvertController().run(str(gradient_image_path))

    assert output == str(gradient_image_path.with_name("gradient_bw.png"))
    with Image.open(output) as result:
        assert result.size == (64, 48)
        arr = np.asarray(result.convert("RGB"))
    assert np.array_equal(arr[:, :, 0], arr[:, :, 1])
    assert np.array_equal(arr[:, :, 1], arr[:, :, 2])


def test_run_missing_file(tmp_path):
    missing = tmp_path / "missing.png"
    with pytest.raises(ImageNotFoundError):
        ConvertController().run(str(missing))
    assert not (tmp_path / "missing_bw.png").exists()


def test_run_non_image(not_an_image_path):
    with pytest.raises(ImageDecodeError):
        ConvertController().run(str(not_an_image_path))
    assert not not_an_image_path.with_name("notes_bw.png").exists()


def test_run_without_extension_fails_to_encode(tmp_path, color_image_path):
    source = tmp_path / "image"
    source.write_bytes(color_image_path.read_bytes())

    with pytest.raises(ImageEncodeError) as excinfo:
        ConvertController().run(str(source))

    assert excinfo.value.path == str(tmp_path / "image_bw")
    assert not (tmp_path / "image_bw").exists()


def test_metadata_failures_do_not_abort(color_image_path):
    controller = ConvertController(file_service=_BrokenProbeFileService())
    output = controller.run(str(color_image_path))
    with Image.open(output) as result:
        assert result.size == (100, 100)


def test_run_is_deterministic(color_image_path):
    controller = ConvertController()
    first = Path(controller.run(str(color_image_path))).read_bytes()
    second = Path(controller.run(str(color_image_path))).read_bytes()
    assert first == second


def test_16bit_input_keeps_its_gray_level(tmp_path):
    source = tmp_path / "deep.png"
    Image.fromarray(np.full((20, 20), 30000, dtype=np.uint16)).save(source)

    output = ConvertController().run(str(source))

    with Image.open(output) as result:
        arr = np.asarray(result.convert("RGB"))
    assert arr[15, 2].tolist() == [117, 117, 117]


def test_existence_comes_from_single_probe(tmp_path, color_image_path):
    class _CountingFileService(FileService):
        calls = 0

        def probe(self, file_path):
            type(self).calls += 1
            return super().probe(file_path)

    ConvertController(file_service=_CountingFileService()).run(str(color_image_path))
    assert _CountingFileService.calls == 1

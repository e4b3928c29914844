import os

import pytest

from img2ascii.constants import AspectMode, ConversionMode
from img2ascii.converter import (
    Converter, convert, convert_banner, convert_with_options, write_atomic,
)
from img2ascii.errors import DecodeError, ResizeError, WriteError
from img2ascii.models import ConversionConfig, ConversionOptions

from conftest import canonical

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
PIXEL = ConversionOptions(aspect_mode=AspectMode.PIXEL)


def rows_of(text):
    assert text.endswith('\n')
    return text[:-1].split('\n')


def test_two_by_two_black_and_white(image_file, tmp_path):
    out = tmp_path / 'out.txt'
    assert convert_with_options(image_file(2, 2, BLACK), str(out), PIXEL) == '@@\n@@\n'
    assert out.read_text() == '@@\n@@\n'
    assert convert_with_options(image_file(2, 2, WHITE), str(out), PIXEL) == '..\n..\n'
    assert out.read_text() == '..\n..\n'


def test_convert_image_without_resampling():
    assert Converter(ConversionConfig(aspect_mode=AspectMode.PIXEL)).convert_image(
        canonical(2, 2, BLACK)) == '@@\n@@\n'


def test_default_convert_fits_box(image_file, tmp_path):
    out = tmp_path / 'art.txt'
    text = convert(image_file(200, 100, BLACK), str(out))
    rows = rows_of(text)
    assert len(rows) == 32
    assert all(row == '@' * 65 for row in rows)
    assert out.read_text() == text


def test_default_convert_reverse(image_file, tmp_path):
    text = convert(image_file(10, 10, WHITE), str(tmp_path / 'out.txt'), reverse=True)
    assert set(text) == {'@', '\n'}


def test_banner_ramp_and_box(png_bytes, tmp_path):
    text = convert_banner(png_bytes(50, 10, WHITE), str(tmp_path / 'b.txt'), 20, 5)
    rows = rows_of(text)
    assert rows == [' ' * 20] * 4


def test_fixed_mode_ignores_aspect(image_file, tmp_path):
    options = ConversionOptions(aspect_mode=AspectMode.FIXED, fixed_width=7, fixed_height=3,
                                mode=ConversionMode.BANNER)
    text = convert_with_options(image_file(100, 10, BLACK), str(tmp_path / 'f.txt'), options)
    assert rows_of(text) == ['@' * 7] * 3


def test_fixed_mode_rejects_zero_size(image_file, tmp_path):
    options = ConversionOptions(aspect_mode=AspectMode.FIXED, fixed_width=0, fixed_height=3)
    out = tmp_path / 'f.txt'
    with pytest.raises(ResizeError):
        convert_with_options(image_file(4, 4), str(out), options)
    assert not out.exists()


def test_pixel_mode_caps_output(image_file, tmp_path):
    text = convert_with_options(image_file(600, 100, BLACK), str(tmp_path / 'p.txt'), PIXEL)
    rows = rows_of(text)
    assert len(rows) == 50
    assert all(len(row) == 300 for row in rows)


@pytest.mark.parametrize("workers", [1, 4])
def test_rows_have_uniform_width(image_file, tmp_path, workers):
    text = convert(image_file(640, 480, (90, 160, 30, 255)), str(tmp_path / 'o.txt'),
                   workers=workers)
    rows = rows_of(text)
    assert len(rows) == 48
    assert {len(row) for row in rows} == {65}


def test_corrupt_input_writes_nothing(tmp_path):
    source = tmp_path / 'broken.png'
    source.write_bytes(b'\x89PNG\r\n\x1a\n' + b'\x00' * 40)
    out = tmp_path / 'out.txt'
    with pytest.raises(DecodeError):
        convert(str(source), str(out))
    assert not out.exists()


def test_failed_conversion_keeps_existing_destination(tmp_path):
    out = tmp_path / 'out.txt'
    out.write_text('previous')
    with pytest.raises(DecodeError):
        convert(b'garbage', str(out))
    assert out.read_text() == 'previous'


def test_unwritable_destination(image_file, tmp_path):
    with pytest.raises(WriteError):
        convert(image_file(4, 4), str(tmp_path / 'missing-dir' / 'out.txt'))


def test_write_atomic_leaves_no_temp_files(tmp_path):
    out = tmp_path / 'out.txt'
    write_atomic(str(out), 'ab\n')
    assert out.read_text() == 'ab\n'
    assert os.listdir(tmp_path) == ['out.txt']


def test_write_atomic_cleans_up_on_encode_failure(tmp_path):
    out = tmp_path / 'out.txt'
    with pytest.raises(WriteError):
        write_atomic(str(out), 'café\n')
    assert os.listdir(tmp_path) == []


def test_debug_log_is_opt_in(image_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = image_file(2, 2, BLACK)
    convert_with_options(source, str(tmp_path / 'out.txt'), PIXEL)
    assert not (tmp_path / 'img2ascii.log').exists()

    log_path = tmp_path / 'debug.log'
    convert_with_options(source, str(tmp_path / 'out.txt'), PIXEL, debug_log=str(log_path))
    assert log_path.read_text() == '@@\n@@\n'


def test_debug_log_failure_does_not_fail_conversion(image_file, tmp_path):
    bad_log = str(tmp_path / 'no-such-dir' / 'debug.log')
    text = convert_with_options(image_file(2, 2, BLACK), str(tmp_path / 'out.txt'), PIXEL,
                                debug_log=bad_log)
    assert text == '@@\n@@\n'


def test_accepts_bytes_source(png_bytes, tmp_path):
    text = convert_with_options(png_bytes(3, 1, WHITE), str(tmp_path / 'out.txt'), PIXEL)
    assert text == '...\n'

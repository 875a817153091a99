import numpy as np
import pytest

from whisperstream.resampler import Resampler


def make_sine(sample_rate, freq_hz, num_samples):
    t = np.arange(num_samples, dtype=np.float32) / np.float32(sample_rate)
    return np.sin(2.0 * np.pi * freq_hz * t).astype(np.float32)


def test_construct_same_rate_no_resampling():
    assert Resampler(16000, 16000).needs_resampling() is False


def test_construct_different_rate_needs_resampling():
    assert Resampler(48000, 16000).needs_resampling() is True


def test_construct_zero_src_rate_raises():
    with pytest.raises(ValueError):
        Resampler(0, 16000)


def test_construct_zero_dst_rate_raises():
    with pytest.raises(ValueError):
        Resampler(16000, 0)


def test_construct_negative_rate_raises():
    with pytest.raises(ValueError):
        Resampler(-1, 16000)
    with pytest.raises(ValueError):
        Resampler(16000, -1)


def test_process_same_rate_passthrough():
    r = Resampler(16000, 16000)
    data = make_sine(16000, 440.0, 1600)
    result = r.process(data, True)
    assert result.size == data.size
    np.testing.assert_array_equal(result, data)


def test_process_48k_to_16k_downsamples():
    r = Resampler(48000, 16000)
    result = r.process(make_sine(48000, 440.0, 4800), True)
    assert int(1600 * 0.95) <= result.size <= int(1600 * 1.05)


def test_process_8k_to_16k_upsamples():
    r = Resampler(8000, 16000)
    result = r.process(make_sine(8000, 440.0, 800), True)
    assert int(1600 * 0.95) <= result.size <= int(1600 * 1.05)


def test_process_empty_input_no_output():
    r = Resampler(48000, 16000)
    assert r.process([], True).size == 0


def test_process_single_sample():
    r = Resampler(16000, 16000)
    assert r.process([0.5], True).size >= 1


def test_reset_works():
    r = Resampler(48000, 16000)
    data = make_sine(48000, 440.0, 480)
    r.process(data)
    r.reset()
    result = r.process(data, True)
    assert result.size > 0


def test_ratio_correct():
    assert Resampler(48000, 16000).ratio() == 16000.0 / 48000.0


def test_process_large_input():
    r = Resampler(48000, 16000)
    result = r.process(np.full(50000, 0.5, dtype=np.float32))
    assert result.size > 0
    assert result.size == pytest.approx(50000.0 / 3.0, abs=500.0)


def test_dc_level_preserved_in_steady_state():
    r = Resampler(48000, 16000)
    result = r.process(np.full(48000, 0.5, dtype=np.float32))
    middle = result[len(result) // 4: 3 * len(result) // 4]
    np.testing.assert_allclose(middle, 0.5, atol=0.01)


def test_chunked_stream_matches_single_call():
    data = make_sine(48000, 440.0, 9600)
    whole = Resampler(48000, 16000).process(data, True)
    r = Resampler(48000, 16000)
    parts = [r.process(data[:3000]), r.process(data[3000:7000]), r.process(data[7000:], True)]
    chunked = np.concatenate(parts)
    assert chunked.size == whole.size
    np.testing.assert_allclose(chunked, whole, atol=1e-5)


def test_interleaved_channel_count_mismatch_raises():
    r = Resampler(48000, 16000, channels=2)
    with pytest.raises(ValueError):
        r.process(np.zeros(3, dtype=np.float32))
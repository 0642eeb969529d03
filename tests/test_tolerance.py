"""Tests for the process-wide tolerance configuration."""

import logging

import numpy as np
import pytest

from solidgeom import tolerance as tol_mod
from solidgeom.errors import DegenerateDirection
from solidgeom.tolerance import (
    DEFAULT_EPSILON,
    close,
    get_epsilon,
    isgoodnum,
    resolve,
    set_epsilon,
    tolerance,
)
from solidgeom.vector import Vector3d


class TestTolerance:

    def test_default(self):
        assert DEFAULT_EPSILON == 1e-10
        assert get_epsilon() == DEFAULT_EPSILON
        assert resolve() == DEFAULT_EPSILON
        assert resolve(1e-3) == 1e-3

    def test_context_restores(self):
        before = get_epsilon()
        with tolerance(1e-4) as eps:
            assert eps == 1e-4
            assert get_epsilon() == 1e-4
        assert get_epsilon() == before

    def test_context_restores_on_error(self):
        before = get_epsilon()
        with pytest.raises(RuntimeError):
            with tolerance(1e-4):
                raise RuntimeError('boom')
        assert get_epsilon() == before

    def test_set_epsilon(self):
        old = set_epsilon(1e-6)
        try:
            assert get_epsilon() == 1e-6
        finally:
            set_epsilon(old)
        assert get_epsilon() == old

    @pytest.mark.parametrize('bad', [0, -1.0, True, 'small'])
    def test_bad_values(self, bad):
        with pytest.raises(ValueError):
            set_epsilon(bad)
        with pytest.raises(ValueError):
            resolve(bad)

    def test_close(self):
        assert close(1.0, 1.0 + 1e-12)
        assert not close(1.0, 1.0 + 1e-6)
        assert close(1.0, 1.0 + 1e-6, tol=1e-5)

    def test_isgoodnum(self):
        assert isgoodnum(1)
        assert isgoodnum(2.5)
        assert not isgoodnum(False)
        assert not isgoodnum('1')

    def test_isgoodnum_numpy(self):
        assert isgoodnum(np.float32(0.5))
        assert isgoodnum(np.float64(0.5))
        assert isgoodnum(np.int64(3))
        assert not isgoodnum(np.bool_(True))
        assert not isgoodnum(np.array([1.0]))


class TestNormalizationTolerance:

    def test_small_vector_normalizes_by_default(self):
        d = Vector3d(1e-8, 0, 0).direction()
        assert d.x == pytest.approx(1.0)

    def test_small_vector_degenerate_under_looser_tolerance(self):
        with tolerance(1e-6):
            with pytest.raises(DegenerateDirection):
                Vector3d(1e-8, 0, 0).direction()

    def test_per_call_tolerance_wins(self):
        with pytest.raises(DegenerateDirection):
            Vector3d(1e-8, 0, 0).direction(tol=1e-6)
        with tolerance(1e-6):
            assert Vector3d(1e-8, 0, 0).direction(tol=1e-12).x == pytest.approx(1.0)


class TestEnvironment:

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(tol_mod.ENV_VAR, '1e-7')
        assert tol_mod._initial_epsilon() == 1e-7

    def test_env_unset(self, monkeypatch):
        monkeypatch.delenv(tol_mod.ENV_VAR, raising=False)
        assert tol_mod._initial_epsilon() == DEFAULT_EPSILON

    @pytest.mark.parametrize('raw', ['tiny', '-1', '0'])
    def test_env_bad_value_is_ignored(self, monkeypatch, caplog, raw):
        monkeypatch.setenv(tol_mod.ENV_VAR, raw)
        with caplog.at_level(logging.WARNING, logger='solidgeom.tolerance'):
            assert tol_mod._initial_epsilon() == DEFAULT_EPSILON
        assert tol_mod.ENV_VAR in caplog.text

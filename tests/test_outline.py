# vim: set et sw=4 sts=4 fileencoding=utf-8:
#
# Pill reveal animation geometry for popup items
# Copyright (c) 2016-2018 Dave Jones <dave@waveform.org.uk>
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#     * Redistributions of source code must retain the above copyright
#       notice, this list of conditions and the following disclaimer.
#     * Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#     * Neither the name of the copyright holder nor the
#       names of its contributors may be used to endorse or promote products
#       derived from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

import warnings
from math import isclose

import pytest

from pillreveal import *


@pytest.fixture()
def zoom(pill_rect):
    def make(is_container_above_icon=True, pivot_left=False):
        return ZoomReveal(
            (40, 40), pill_rect, 8, is_container_above_icon, pivot_left)
    return make


def test_provider_abstract():
    with pytest.raises(NotImplementedError):
        RevealProvider().set_progress(0.5)


def test_pill_reveal_start(pill_rect):
    pill = PillReveal((40, 40), pill_rect, 8)
    # A circle of the configured radius around the center
    assert pill.outline(0) == Outline(32, 32, 48, 48, 8)


def test_pill_reveal_finish(pill_rect):
    pill = PillReveal((40, 40), pill_rect, 8)
    assert pill.outline(1) == Outline(0, 0, 200, 80, 8)
    assert pill.outline(1).rect == pill_rect


def test_pill_reveal_order_independent(pill_rect):
    pill = PillReveal((40, 40), pill_rect, 8)
    finish = pill.outline(1)
    start = pill.outline(0)
    assert pill.outline(0.5) == Outline(16, 16, 124, 64, 8)
    assert pill.outline(1) == finish
    assert pill.outline(0) == start
    assert pill.outline(0) == Outline(32, 32, 48, 48, 8)


def test_pill_reveal_clipped_start(pill_rect):
    pill = PillReveal((4, 40), pill_rect, 8)
    start = pill.outline(0)
    assert start.left == 0
    assert start.right == 12
    assert pill.outline(1).rect == pill_rect


def test_pill_reveal_transform(pill_rect):
    t = PillReveal((40, 40), pill_rect, 8).set_progress(0.5)
    assert t.outline == Outline(16, 16, 124, 64, 8)
    assert t.scale is None
    assert t.translation == Point(0, 0)


def test_pill_reveal_properties(pill_rect):
    pill = PillReveal((40, 40), pill_rect, 8)
    assert pill.center == Point(40, 40)
    assert pill.pill_rect == pill_rect
    assert pill.radius == 8
    assert repr(pill) == (
        'PillReveal(center=Point(x=40, y=40), '
        'pill_rect=Rect(left=0, top=0, right=200, bottom=80), radius=8)')


def test_zoom_scale_follows_progress(zoom):
    provider = zoom()
    for p in linear(21):
        assert provider.set_progress(p).scale == p


def test_zoom_outline_extremes(zoom, pill_rect):
    provider = zoom()
    assert provider.set_progress(0).outline == Outline(32, 32, 48, 48, 8)
    assert provider.set_progress(1).outline == Outline(0, 0, 200, 80, 8)


@pytest.mark.parametrize('pivot_left', [False, True])
@pytest.mark.parametrize('above', [False, True])
def test_zoom_pivot_fixed(zoom, above, pivot_left):
    provider = zoom(above, pivot_left)
    for p in linear(21):
        t = provider.set_progress(p)
        assert isclose(
            t.translation.x + provider.pivot_x(p), provider.translate_x)


def test_zoom_above_pivot_right(zoom):
    provider = zoom(True, False)
    assert provider.translate_y_multiplier == 0.5
    assert provider.translate_x == 160
    t = provider.set_progress(0.5)
    assert t.outline == Outline(16, 16, 124, 64, 8)
    # 0.5 * (80 - 48)
    assert t.translation.y == 16
    assert t.translation.y > 0
    # 160 - (124 - 48 / 2)
    assert t.translation.x == 60


def test_zoom_below(zoom):
    provider = zoom(False, False)
    assert provider.translate_y_multiplier == -0.5
    t = provider.set_progress(0.5)
    assert t.translation.y == -16


def test_zoom_pivot_left(zoom):
    provider = zoom(True, True)
    assert provider.pivot_left
    assert provider.translate_x == 40
    # The icon sits at the left end, so the pivot never moves
    for p in linear(11):
        assert isclose(provider.set_progress(p).translation.x, 0, abs_tol=1e-9)


def test_zoom_finish_untranslated(zoom):
    for above in (False, True):
        for pivot_left in (False, True):
            t = zoom(above, pivot_left).set_progress(1)
            assert t.translation == Point(0, 0)
            assert t.scale == 1


def test_zoom_start(zoom):
    t = zoom(True, False).set_progress(0)
    assert t.scale == 0
    # 0.5 * (80 - 16)
    assert t.translation.y == 32
    # 160 - (48 - 16 / 2)
    assert t.translation.x == 120


def test_zoom_properties(zoom, pill_rect):
    provider = zoom()
    assert isinstance(provider.pill, PillReveal)
    assert provider.pill.pill_rect == pill_rect
    assert repr(provider).startswith('ZoomReveal(pivot=Point(x=40, y=40)')
    assert 'is_container_above_icon=True' in repr(provider)


def test_progress_range_warning(zoom):
    provider = zoom()
    with pytest.warns(RevealProgressRange):
        provider.set_progress(1.5)
    with pytest.warns(RevealProgressRange):
        provider.set_progress(-0.1)
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        provider.set_progress(0)
        provider.set_progress(1)


def test_pill_width_reveal(pill_rect):
    provider = PillWidthReveal(pill_rect, 0, 80)
    assert provider.pill_rect == pill_rect
    assert provider.outline(0) == Outline(0, 0, 80, 80, 40)
    assert provider.outline(0.5) == Outline(0, 0, 140, 80, 40)
    assert provider.outline(1) == Outline(0, 0, 200, 80, 40)


def test_pill_width_reveal_transform(pill_rect):
    t = PillWidthReveal(pill_rect, 120, 200).set_progress(0.25)
    assert t.outline == Outline(90, 0, 200, 80, 40)
    assert t.scale is None
    assert t.translation == Point(0, 0)


def test_pill_width_reveal_repr(pill_rect):
    assert repr(PillWidthReveal(pill_rect, 0, 80)) == (
        'PillWidthReveal(pill_rect=Rect(left=0, top=0, right=200, bottom=80), '
        'left=0, right=80)')

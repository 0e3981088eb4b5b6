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

import numpy as np

from pillreveal import *


def test_point():
    p = Point(1, 2.5)
    assert p.x == 1
    assert p.y == 2.5
    assert repr(p) == 'Point(x=1, y=2.5)'


def test_rect():
    r = Rect(0, 0, 200, 80)
    assert r.width == 200
    assert r.height == 80
    assert not r.empty
    assert repr(r) == 'Rect(left=0, top=0, right=200, bottom=80)'


def test_rect_empty():
    assert Rect(0, 0, 0, 0).empty
    assert Rect(0, 0, 200, 0).empty
    assert Rect(0, 0, 0, 80).empty
    assert Rect(10, 10, 5, 20).empty


def test_outline():
    o = Outline(16, 16, 124, 64, 8)
    assert o.width == 108
    assert o.height == 48
    assert o.rect == Rect(16, 16, 124, 64)
    assert repr(o) == (
        'Outline(left=16, top=16, right=124, bottom=64, radius=8)')


def test_render_transform_record():
    t = RenderTransform(Outline(0, 0, 200, 80, 8), 0.5, Point(3, -4))
    arr = np.empty(1, dtype=transform_dtype)
    arr[0] = t.to_record(0.5)
    assert arr[0]['progress'] == 0.5
    assert arr[0]['scale'] == 0.5
    assert arr[0]['tx'] == 3
    assert arr[0]['ty'] == -4
    assert arr[0]['right'] == 200
    assert arr[0]['bottom'] == 80
    assert arr[0]['radius'] == 8


def test_render_transform_record_no_scale():
    t = RenderTransform(Outline(0, 0, 200, 80, 40), None, Point(0, 0))
    arr = np.empty(1, dtype=transform_dtype)
    arr[0] = t.to_record(1)
    assert np.isnan(arr[0]['scale'])

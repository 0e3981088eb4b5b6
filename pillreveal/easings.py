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

"""
Defines the easing curves used by the reveal animations.

Every curve is an object with an :meth:`~Curve.evaluate` method mapping a
time fraction between 0.0 and 1.0 to an eased fraction. Curves are also
callable with a number of *steps*, in which case they yield that many eased
values between 0.0 and 1.0 (like :func:`linear` does for un-eased time).
"""


def linear(steps):
    """
    Linear time base; yields *steps* values between 0.0 and 1.0.

    This generator drives every frame generator in the package; the first
    value is always 0.0 and the last is always 1.0 (unless *steps* is 1, in
    which case the only value is 1.0).
    """
    if steps <= 0:
        raise ValueError('steps must be a positive integer >0')
    elif steps == 1:
        yield 1.0
    else:
        for t in range(steps):
            yield t / (steps - 1)


class Curve:
    """
    Abstract base class for easing curves. Descendents must override
    :meth:`evaluate`.
    """
    __slots__ = ()

    def evaluate(self, t):
        """
        Return the eased fraction for the time fraction *t* (between 0.0 and
        1.0).
        """
        raise NotImplementedError

    def __call__(self, steps):
        for t in linear(steps):
            yield self.evaluate(t)


class LinearCurve(Curve):
    """
    The identity curve; the animation progresses at a constant rate from start
    to finish. This is the default easing of :class:`~pillreveal.RevealAnimation`.
    """
    __slots__ = ()

    def __repr__(self):
        return 'LinearCurve()'

    def evaluate(self, t):
        return t


class LogAccelerateCurve(Curve):
    """
    An accelerating curve based on a logarithmic decay, parameterized by the
    *base* of the exponent and a linear *drift* term.

    Larger values of *base* make the curve start more slowly and finish more
    abruptly. The default (100, 0) is the base of the close animation's
    :class:`ResumableEaseCurve`.
    """
    __slots__ = ('_base', '_drift', '_log_total')

    def __init__(self, base=100, drift=0):
        if base <= 1:
            raise ValueError('base must be greater than 1')
        self._base = base
        self._drift = drift
        self._log_total = self._log(1)

    def __repr__(self):
        return 'LogAccelerateCurve(base=%g, drift=%g)' % (self._base, self._drift)

    @property
    def base(self):
        "The base of the exponent passed to the constructor"
        return self._base

    @property
    def drift(self):
        "The linear drift term passed to the constructor"
        return self._drift

    def _log(self, t):
        return -self._base ** -t + 1 + self._drift * t

    def evaluate(self, t):
        # Float precision means the formula doesn't quite reach 1 at t=1
        if t == 1:
            return 1.0
        return 1 - self._log(1 - t) / self._log_total


class ResumableEaseCurve(Curve):
    """
    A curve which lets a close animation resume from wherever an open
    animation stopped.

    The *open_progress* parameter is the fraction (between 0.0 and 1.0) that
    the open animation had reached when the close was requested. The curve
    starts at ``1 - open_progress`` and follows the *base_curve* (which
    defaults to :class:`LogAccelerateCurve` with its default parameters) up to
    1.0, compressed into the remaining *open_progress*. Hence, when
    *open_progress* is 1.0 the curve is exactly *base_curve*, and when it is
    0.0 the curve is constant at 1.0 (the close is already complete).

    The close animation plays in reverse, so its reveal progress is ``1 -
    evaluate(t)``, which begins at *open_progress* and falls to 0.0.
    """
    __slots__ = ('_base_curve', '_start_progress', '_remaining_progress')

    def __init__(self, open_progress, base_curve=None):
        if base_curve is None:
            base_curve = LogAccelerateCurve()
        self._base_curve = base_curve
        self._start_progress = 1 - open_progress
        self._remaining_progress = open_progress

    def __repr__(self):
        return 'ResumableEaseCurve(open_progress=%g, base_curve=%r)' % (
            self._remaining_progress, self._base_curve)

    @property
    def base_curve(self):
        "The curve that is compressed into the remaining progress"
        return self._base_curve

    @property
    def start_progress(self):
        "The value of the curve at t=0; equal to ``1 - open_progress``"
        return self._start_progress

    @property
    def remaining_progress(self):
        "The span covered by the curve; equal to the *open_progress*"
        return self._remaining_progress

    def evaluate(self, t):
        # Rounding in the sum can overshoot 1.0 when the base curve finishes
        return min(1.0, (
            self._start_progress +
            self._base_curve.evaluate(t) * self._remaining_progress))

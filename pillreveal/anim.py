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
Defines the :class:`RevealAnimation` class, the handle returned to hosts for
every reveal animation. The package owns no frame clock; hosts either poll
:meth:`RevealAnimation.update` from their own frame loop, or iterate over
:meth:`RevealAnimation.frames`.
"""

import numpy as np

from .exc import RevealError
from .easings import linear, LinearCurve
from .geometry import transform_dtype


class RevealAnimation:
    """
    Represents a single reveal animation driving a geometry *provider* (one
    of :class:`~pillreveal.PillReveal`, :class:`~pillreveal.ZoomReveal`, or
    :class:`~pillreveal.PillWidthReveal`) over *duration* seconds.

    The *easing* parameter is a :class:`~pillreveal.easings.Curve` which maps
    the time fraction to the animated fraction; it defaults to
    :class:`~pillreveal.easings.LinearCurve`. If *reverse* is ``True``, the
    reveal progress passed to the provider is ``1 - fraction`` (so the
    animation runs from a full reveal back to nothing). The *fps* parameter
    specifies the default frame rate of :meth:`frames`.

    Three kinds of listener can be attached; each is called with the
    animation as its only argument:

    * update listeners, after every call to :meth:`update`

    * cancel listeners, when :meth:`cancel` is called

    * end listeners, when the animation ends, whether it ran to completion or
      was cancelled
    """
    # pylint: disable=too-many-instance-attributes

    __slots__ = (
        '_provider',
        '_duration',
        '_easing',
        '_reverse',
        '_update_listeners',
        '_cancel_listeners',
        '_end_listeners',
        '_started',
        '_finished',
        '_cancelled',
        '_last_time',
        '_last_fraction',
        'fps',
    )

    def __init__(self, provider, duration, easing=None, reverse=False, fps=60):
        # pylint: disable=too-many-arguments
        if duration < 0:
            raise ValueError('duration must be zero or positive')
        if fps <= 0:
            raise ValueError('fps must be positive')
        if easing is None:
            easing = LinearCurve()
        self._provider = provider
        self._duration = duration
        self._easing = easing
        self._reverse = bool(reverse)
        self._update_listeners = []
        self._cancel_listeners = []
        self._end_listeners = []
        self._started = False
        self._finished = False
        self._cancelled = False
        self._last_time = None
        self._last_fraction = None
        self.fps = fps

    def __repr__(self):
        return '<RevealAnimation provider=%r duration=%g reverse=%s%s>' % (
            self._provider, self._duration, self._reverse,
            ' cancelled' if self._cancelled else
            ' finished' if self._finished else
            ' running' if self._started else '')

    @property
    def provider(self):
        "The geometry provider driven by the animation"
        return self._provider

    @property
    def duration(self):
        "The length of the animation in seconds"
        return self._duration

    @property
    def easing(self):
        "The :class:`~pillreveal.easings.Curve` applied to the time fraction"
        return self._easing

    @property
    def reverse(self):
        "``True`` if the reveal progress runs from 1.0 down to 0.0"
        return self._reverse

    @property
    def started(self):
        "``True`` once :meth:`update` has been called"
        return self._started

    @property
    def finished(self):
        "``True`` once the animation has ended (completed or cancelled)"
        return self._finished

    @property
    def cancelled(self):
        "``True`` if the animation was ended by :meth:`cancel`"
        return self._cancelled

    @property
    def running(self):
        "``True`` if the animation has started but not yet finished"
        return self._started and not self._finished

    @property
    def last_time(self):
        """
        The time fraction passed to the most recent :meth:`update`, or
        ``None`` if the animation hasn't started.
        """
        return self._last_time

    @property
    def last_fraction(self):
        """
        The eased fraction calculated by the most recent :meth:`update`, or
        ``None`` if the animation hasn't started.
        """
        return self._last_fraction

    @property
    def last_value(self):
        """
        The reveal progress passed to the provider by the most recent
        :meth:`update`, or ``None`` if the animation hasn't started.
        """
        if self._last_fraction is None:
            return None
        return self._value(self._last_fraction)

    def add_update_listener(self, listener):
        "Call *listener* with the animation after every :meth:`update`"
        self._update_listeners.append(listener)

    def add_cancel_listener(self, listener):
        "Call *listener* with the animation when it is cancelled"
        self._cancel_listeners.append(listener)

    def add_end_listener(self, listener):
        "Call *listener* with the animation when it ends"
        self._end_listeners.append(listener)

    def _value(self, fraction):
        return 1 - fraction if self._reverse else fraction

    def fraction(self, t):
        """
        Return the eased fraction for the time fraction *t* (between 0.0 and
        1.0).
        """
        return self._easing.evaluate(t)

    def value(self, t):
        """
        Return the reveal progress passed to the provider at the time
        fraction *t*.
        """
        return self._value(self.fraction(t))

    def elapsed(self, t):
        "Return the time in seconds corresponding to the time fraction *t*"
        return t * self._duration

    def sample(self, t):
        """
        Return the :class:`~pillreveal.RenderTransform` at the time fraction
        *t* without affecting the state of the animation or calling any
        listeners.
        """
        return self._provider.set_progress(self.value(t))

    def sample_array(self, times):
        """
        Return an :class:`~numpy.ndarray` of :data:`~pillreveal.transform_dtype`
        with the same shape as *times* (any array-like of time fractions)
        containing the transform sampled at each time. The ``progress`` field
        of each element holds the reveal progress passed to the provider.
        Like :meth:`sample` this doesn't affect the state of the animation.

        This is a batch convenience: each time is sampled in turn through the
        provider, and numpy only holds the results (which makes slicing by
        field, e.g. ``arr['scale']``, cheap for hosts plotting curves).
        """
        times = np.asarray(times, dtype=np.float64)
        result = np.empty(times.shape, dtype=transform_dtype)
        for index, t in np.ndenumerate(times):
            t = float(t)
            result[index] = self.sample(t).to_record(self.value(t))
        return result

    def update(self, t):
        """
        Advance the animation to the time fraction *t* (between 0.0 and 1.0),
        call the update listeners, and return the
        :class:`~pillreveal.RenderTransform` for the new state.

        Hosts driving the animation from their own frame loop should call this
        once per frame with monotonically increasing values of *t*, and call
        :meth:`end` after the final frame.
        """
        if self._finished:
            raise RevealError('animation has already finished')
        self._started = True
        self._last_time = t
        self._last_fraction = self.fraction(t)
        transform = self._provider.set_progress(self._value(self._last_fraction))
        for listener in self._update_listeners:
            listener(self)
        return transform

    def end(self):
        """
        Mark the animation as finished and call the end listeners. The method
        is idempotent (only the first call to :meth:`end` or :meth:`cancel`
        has any effect).
        """
        if not self._finished:
            self._finished = True
            for listener in self._end_listeners:
                listener(self)

    def cancel(self):
        """
        Cancel the animation at whatever point it has reached. The cancel
        listeners are called, followed by the end listeners. Cancelling an
        animation which has already finished does nothing.
        """
        if not self._finished:
            self._cancelled = True
            for listener in self._cancel_listeners:
                listener(self)
            self.end()

    def frames(self, fps=None):
        """
        Generator method which plays the animation, yielding a
        :class:`~pillreveal.RenderTransform` for each frame.

        The *fps* parameter (which defaults to the :attr:`fps` attribute)
        controls how many frames are yielded: ``int(duration * fps)``. An
        animation too short for a single frame yields only its final frame.
        The first frame is always at the start of the animation and the last
        at its end; :meth:`end` is called once the final frame has been
        consumed. If the generator is closed before then, the animation is
        cancelled instead.
        """
        if fps is None:
            fps = self.fps
        if fps <= 0:
            raise ValueError('fps must be positive')
        steps = int(self._duration * fps)
        try:
            if steps > 0:
                for t in linear(steps):
                    yield self.update(t)
            else:
                yield self.update(1.0)
        except GeneratorExit:
            self.cancel()
            raise
        self.end()

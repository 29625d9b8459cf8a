class ChannelClosedError(RuntimeError):
    """Raised when a closed channel is used for a put, or drained by a take.

    A channel stays readable after :meth:`Channel.close` until the buffered
    items are consumed; only then does ``take`` raise. ``put`` raises as soon
    as the channel is closed.
    """

class _Unmatched:
    """Returned by a special-form handler when the form's shape is not one it
    accepts; the evaluator then treats the form as an ordinary application."""

    __slots__ = ()

    def __repr__(self):
        return "UNMATCHED"


UNMATCHED = _Unmatched()

# -*- coding: utf-8 -*-

THRESHER_CONTEXT = None


def get_context():
    if not THRESHER_CONTEXT:
        set_context(ThresherContext())

    return THRESHER_CONTEXT


def set_context(context):
    global THRESHER_CONTEXT

    THRESHER_CONTEXT = context

    return context


def note(name, message, *a, **kw):
    return get_context().note(name, message, *a, **kw)


class ThresherContext(object):
    def __init__(self, **kwargs):
        self.note_handlers = list(kwargs.pop('note_handlers', None) or [])
        if kwargs:
            raise TypeError('unexpected keyword arguments: %r'
                            % list(kwargs.keys()))

    def note(self, name, message, *a, **kw):
        """thresher can't filter its own diagnostics through itself. This
        is a hook for recording the conditions that are tolerated
        rather than raised, such as an unrecognized level
        abbreviation or a message that doesn't format correctly at
        runtime.
        """
        if not self.note_handlers:
            return
        if a:
            try:
                message = message % a
            except Exception:
                pass
        for nh in self.note_handlers:
            nh(name, message)
        return

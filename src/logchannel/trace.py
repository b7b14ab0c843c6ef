"""
Function tracing decorator.

Writes entry/exit records through a gate's debug sink on a named channel
(default 'trace'), so tracing is switched on like any other channel:

    LOG_CHANNELS=default,trace python app.py
"""

import functools
import inspect

from .render import short_repr


def trace(func=None, *, channel='trace', gate=None):
    """Decorator to trace function calls via a ChannelGate.

    Usable bare (``@trace``) or with options
    (``@trace(channel='db', gate=my_gate)``). Without a gate the
    module-level default gate is looked up on every call.
    """
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            # Lazy import to avoid circular dependency
            from .gate import get_gate

            g = gate if gate is not None else get_gate()
            if not g.is_active(channel):
                return fn(*args, **kwargs)

            module = inspect.getmodule(fn)
            module_name = module.__name__ if module else "unknown"
            name = f"{module_name}.{fn.__qualname__}"

            args_repr = [short_repr(a) for a in args]
            args_repr += [f"{k}={short_repr(v)}" for k, v in kwargs.items()]
            g.debug(channel, f">> {name}({', '.join(args_repr)})")

            try:
                result = fn(*args, **kwargs)
            except Exception as e:
                g.debug(channel, f"!! {name} raised: {type(e).__name__}: {e}")
                raise

            if result is not None:
                g.debug(channel, f"<< {name} returned: {short_repr(result)}")
            return result

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator

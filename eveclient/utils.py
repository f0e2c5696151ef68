import inspect
import os


def expand_path(p: str) -> str:
    p = os.path.expanduser(p)
    p = os.path.normpath(p)
    return p


def get_init_args(cls):
    """
    Get args which are taken during class initialization.

    :param cls: The class to inspect.
    :returns: (all, required), where ``all`` is a set of all arguments the
        class can take, and ``required`` is the subset of arguments the class
        requires.
    """
    spec = inspect.getfullargspec(cls.__init__)
    args = spec.args[1:]
    last = -len(spec.defaults) if spec.defaults else len(args)
    all = set(args) | set(spec.kwonlyargs)
    required = set(args[:last])
    required.update(
        name for name in spec.kwonlyargs if name not in (spec.kwonlydefaults or {})
    )
    return all, required

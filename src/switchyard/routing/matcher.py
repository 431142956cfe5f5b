"""Layer applicability — the method check and the anchor/border check."""

from switchyard.routing.layer import ANY_METHOD, Layer

# Characters allowed right after a matched anchor
BORDER_CHARS = frozenset("/.")


def method_matches(layer_method: str, method: str) -> bool:
    return layer_method == ANY_METHOD or layer_method == method


def anchor_matches(anchor: str, path: str) -> bool:
    """True if *anchor* is a prefix of *path* ending on a border.

    ``/hello`` matches ``/hello``, ``/hello/x`` and ``/hello.json`` but not
    ``/helloworld``. The empty anchor matches everything.
    """
    if not path.startswith(anchor):
        return False
    if len(path) == len(anchor):
        return True
    return path[len(anchor)] in BORDER_CHARS


def applies(layer: Layer, method: str, path: str) -> bool:
    """Whether *layer* should run for a request with *method* and lowercase *path*."""
    return method_matches(layer.method, method) and anchor_matches(layer.anchor, path)

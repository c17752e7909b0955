import importlib.util


def module_available(module_name: str) -> bool:
    try:
        return importlib.util.find_spec(module_name) is not None
    except ModuleNotFoundError:
        return False


def qt_available() -> bool:
    """Whether PySide6 and the gc_gui layer can be imported."""
    return module_available("PySide6") and module_available("gc_gui.viewmodels")

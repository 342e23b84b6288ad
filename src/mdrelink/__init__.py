from __future__ import annotations

from importlib import import_module

from mdrelink.__about__ import __version__

__all__ = [
    "AnchorCache",
    "FilenameIndex",
    "LinkCheckConfig",
    "LinkCheckRuntime",
    "LinkIssue",
    "LinkToken",
    "RunResult",
    "apply_fixes",
    "build_filename_index",
    "check_links",
    "discover_documents",
    "extract_anchors",
    "extract_links",
    "find_target",
    "heading_to_anchor",
    "load_check_config",
    "suggest_fix",
    "validate_document",
    "__version__",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "AnchorCache": ("mdrelink.anchors", "AnchorCache"),
    "extract_anchors": ("mdrelink.anchors", "extract_anchors"),
    "heading_to_anchor": ("mdrelink.anchors", "heading_to_anchor"),
    "LinkCheckConfig": ("mdrelink.config", "LinkCheckConfig"),
    "load_check_config": ("mdrelink.config", "load_check_config"),
    "LinkIssue": ("mdrelink.diagnostics", "LinkIssue"),
    "RunResult": ("mdrelink.diagnostics", "RunResult"),
    "discover_documents": ("mdrelink.discovery", "discover_documents"),
    "suggest_fix": ("mdrelink.fixes", "suggest_fix"),
    "FilenameIndex": ("mdrelink.index", "FilenameIndex"),
    "build_filename_index": ("mdrelink.index", "build_filename_index"),
    "LinkToken": ("mdrelink.links", "LinkToken"),
    "extract_links": ("mdrelink.links", "extract_links"),
    "find_target": ("mdrelink.resolver", "find_target"),
    "validate_document": ("mdrelink.resolver", "validate_document"),
    "LinkCheckRuntime": ("mdrelink.runtime", "LinkCheckRuntime"),
    "apply_fixes": ("mdrelink.runtime", "apply_fixes"),
    "check_links": ("mdrelink.runtime", "check_links"),
}

_SUBMODULES = {
    "anchors",
    "config",
    "diagnostics",
    "discovery",
    "fixes",
    "index",
    "links",
    "report",
    "resolver",
    "runtime",
}


def __getattr__(name: str) -> object:
    if name in _SUBMODULES:
        module = import_module(f"mdrelink.{name}")
        globals()[name] = module
        return module

    target = _LAZY_IMPORTS.get(name)
    if target is None:
        raise AttributeError(f"module 'mdrelink' has no attribute '{name}'")
    module_name, attr_name = target
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))

from static_publish.config import PublishConfig, find_config_file, load_config
from static_publish.content_types import (
    CONTENT_TYPE_RULES,
    UNKNOWN_CONTENT_TYPE,
    ContentType,
    ContentTypeRule,
    classify,
)
from static_publish.errors import (
    AssetReadError,
    ConfigMalformedError,
    ConfigMissingError,
    PublicDirMissingError,
    StaticPublishError,
)
from static_publish.manifest import PublishedAsset, build_manifest, render_module, write_module
from static_publish.publish import build_static_loader, collect_files

__all__ = [
    "CONTENT_TYPE_RULES",
    "UNKNOWN_CONTENT_TYPE",
    "AssetReadError",
    "ConfigMalformedError",
    "ConfigMissingError",
    "ContentType",
    "ContentTypeRule",
    "PublicDirMissingError",
    "PublishConfig",
    "PublishedAsset",
    "StaticPublishError",
    "build_manifest",
    "build_static_loader",
    "classify",
    "collect_files",
    "find_config_file",
    "load_config",
    "render_module",
    "write_module",
]

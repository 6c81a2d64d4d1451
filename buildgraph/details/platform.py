# Platforms and product kinds.
#
# The tables in this module decide which products a platform can host and
# which SDK a platform builds against.

from enum import Enum
from typing import Dict, FrozenSet, Optional


class Platform(Enum):
    IOS = "iOS"
    MACOS = "macOS"
    TVOS = "tvOS"
    WATCHOS = "watchOS"

    @property
    def device_sdk(self) -> str:
        return _DEVICE_SDKS[self]

    @property
    def simulator_sdk(self) -> Optional[str]:
        return _SIMULATOR_SDKS[self]

    @property
    def has_simulators(self) -> bool:
        return self.simulator_sdk is not None


_DEVICE_SDKS: Dict[Platform, str] = {
    Platform.IOS: "iphoneos",
    Platform.MACOS: "macosx",
    Platform.TVOS: "appletvos",
    Platform.WATCHOS: "watchos",
}

_SIMULATOR_SDKS: Dict[Platform, Optional[str]] = {
    Platform.IOS: "iphonesimulator",
    Platform.MACOS: None,
    Platform.TVOS: "appletvsimulator",
    Platform.WATCHOS: "watchsimulator",
}


class Product(Enum):
    APP = "app"
    STATIC_LIBRARY = "static_library"
    DYNAMIC_LIBRARY = "dynamic_library"
    FRAMEWORK = "framework"
    STATIC_FRAMEWORK = "static_framework"
    UNIT_TESTS = "unit_tests"
    UI_TESTS = "ui_tests"
    BUNDLE = "bundle"
    COMMAND_LINE_TOOL = "command_line_tool"
    APP_EXTENSION = "app_extension"
    MESSAGES_EXTENSION = "messages_extension"
    STICKER_PACK_EXTENSION = "sticker_pack_extension"
    TV_TOP_SHELF_EXTENSION = "tv_top_shelf_extension"
    APP_CLIP = "app_clip"
    WATCH2_APP = "watch2_app"
    WATCH2_EXTENSION = "watch2_extension"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_tests_bundle(self) -> bool:
        return self in (Product.UNIT_TESTS, Product.UI_TESTS)

    @property
    def is_library(self) -> bool:
        return self in (Product.STATIC_LIBRARY, Product.DYNAMIC_LIBRARY)


_DESCRIPTIONS: Dict[Product, str] = {
    Product.APP: "application",
    Product.STATIC_LIBRARY: "static library",
    Product.DYNAMIC_LIBRARY: "dynamic library",
    Product.FRAMEWORK: "dynamic framework",
    Product.STATIC_FRAMEWORK: "static framework",
    Product.UNIT_TESTS: "unit tests",
    Product.UI_TESTS: "ui tests",
    Product.BUNDLE: "bundle",
    Product.COMMAND_LINE_TOOL: "command line tool",
    Product.APP_EXTENSION: "app extension",
    Product.MESSAGES_EXTENSION: "messages extension",
    Product.STICKER_PACK_EXTENSION: "sticker pack extension",
    Product.TV_TOP_SHELF_EXTENSION: "tv top shelf extension",
    Product.APP_CLIP: "appClip",
    Product.WATCH2_APP: "watch 2 application",
    Product.WATCH2_EXTENSION: "watch 2 extension",
}

_LIBRARIES = frozenset(
    {
        Product.STATIC_LIBRARY,
        Product.DYNAMIC_LIBRARY,
        Product.FRAMEWORK,
        Product.STATIC_FRAMEWORK,
    }
)

SUPPORTED_PRODUCTS: Dict[Platform, FrozenSet[Product]] = {
    Platform.IOS: _LIBRARIES
    | {
        Product.APP,
        Product.UNIT_TESTS,
        Product.UI_TESTS,
        Product.BUNDLE,
        Product.APP_EXTENSION,
        Product.MESSAGES_EXTENSION,
        Product.STICKER_PACK_EXTENSION,
        Product.APP_CLIP,
    },
    Platform.MACOS: _LIBRARIES
    | {
        Product.APP,
        Product.UNIT_TESTS,
        Product.UI_TESTS,
        Product.BUNDLE,
        Product.COMMAND_LINE_TOOL,
        Product.APP_EXTENSION,
    },
    Platform.TVOS: _LIBRARIES
    | {
        Product.APP,
        Product.UNIT_TESTS,
        Product.UI_TESTS,
        Product.BUNDLE,
        Product.APP_EXTENSION,
        Product.TV_TOP_SHELF_EXTENSION,
    },
    Platform.WATCHOS: _LIBRARIES | {Product.WATCH2_APP, Product.WATCH2_EXTENSION},
}


def supports_product(platform: Platform, product: Product) -> bool:
    return product in SUPPORTED_PRODUCTS[platform]

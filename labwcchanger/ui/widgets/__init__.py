from labwcchanger.ui.widgets.asset_list import AssetList
from labwcchanger.ui.widgets.status_strip import StatusStrip

__all__ = [
    "AssetList",
    "StatusStrip",
]

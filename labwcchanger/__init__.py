"""Pick a desktop style and apply matching labwc, GTK, icon, kitty and wallpaper themes."""

__version__ = "0.3.0"

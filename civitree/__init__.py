"""City/resident registry and non-binary tree explorer with interactive menus."""

__version__ = "0.1.0"
__all__ = ["registry", "registry_cli", "nbtree", "nbtree_cli"]
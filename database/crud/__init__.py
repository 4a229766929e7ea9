from .base_crud import BaseCRUD
from .options_crud import OptionsCRUD

__all__ = ["BaseCRUD", "OptionsCRUD"]

"""CRUD stub library exposed by generated projects."""

from libkit.lib.crud import CRUD_METHODS, CrudPayload, Lib

__all__ = ["CRUD_METHODS", "CrudPayload", "Lib"]

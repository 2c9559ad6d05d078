"""
RemoveDenylistedTypesTransform: drops message envelopes and other meta-only entities
that the runtime provides itself.
"""
from typing import Iterable, Optional
from spec_model import SpecModel

REMOVED_INTERFACE_NAMES = {
    "Message", "RequestMessage", "ResponseMessage", "ResponseError",
    "NotificationMessage", "LSPObject", "T",
}

REMOVED_TYPE_NAMES = {"LSPAny"}


class RemoveDenylistedTypesTransform:
    def __init__(self, interface_names: Optional[Iterable[str]] = None, type_names: Optional[Iterable[str]] = None):
        self.interface_names = set(REMOVED_INTERFACE_NAMES if interface_names is None else interface_names)
        self.type_names = set(REMOVED_TYPE_NAMES if type_names is None else type_names)

    def transform(self, model: SpecModel) -> SpecModel:
        model.interfaces = [i for i in model.interfaces if i.name not in self.interface_names]
        model.types = [t for t in model.types if t.name not in self.type_names]
        return model

"""
RenameEnumerationsTransform: renames enumerations whose name collides with another
concept of the generated code.
"""
from typing import Dict, Optional
from spec_model import SpecModel

# InitializeError (the enumeration) would clash with the InitializeError interface
SPECIAL_ENUM_NAMES = {
    "InitializeError": "InitializeErrorCodes",
}


class RenameEnumerationsTransform:
    def __init__(self, renames: Optional[Dict[str, str]] = None):
        self.renames = dict(SPECIAL_ENUM_NAMES if renames is None else renames)

    def transform(self, model: SpecModel) -> SpecModel:
        for enumeration in model.enumerations:
            if enumeration.name in self.renames:
                enumeration.name = self.renames[enumeration.name]
        return model

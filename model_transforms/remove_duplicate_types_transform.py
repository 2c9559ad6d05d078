"""
RemoveDuplicateTypesTransform: a type alias sharing its name with an enumeration or an
interface is removed, the richer entity wins.
"""
from spec_model import SpecModel


class RemoveDuplicateTypesTransform:
    def transform(self, model: SpecModel) -> SpecModel:
        existing = {e.name for e in model.enumerations}
        existing.update(i.name for i in model.interfaces)
        model.types = [t for t in model.types if t.name not in existing]
        return model

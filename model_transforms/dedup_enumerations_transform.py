"""
DedupEnumerationsTransform: keeps only the first enumeration of each name.
"""
from spec_model import SpecModel


class DedupEnumerationsTransform:
    def transform(self, model: SpecModel) -> SpecModel:
        seen = set()
        enumerations = []
        for enumeration in model.enumerations:
            if enumeration.name in seen:
                continue
            seen.add(enumeration.name)
            enumerations.append(enumeration)
        model.enumerations = enumerations
        return model

"""
PruneDependenciesTransform: cleans the dependency lists of type aliases and interfaces.
Enumerations are always emitted first, so they never block ordering. References to
entities that are not part of the model anymore (denylisted or unknown) and direct
self-references are dropped as well.
"""
from spec_model import SpecModel


class PruneDependenciesTransform:
    def transform(self, model: SpecModel) -> SpecModel:
        enum_names = {e.name for e in model.enumerations}
        known_names = {node.name for node in model.root_types()}
        for node in model.root_types():
            node.dependencies = [
                name for name in node.dependencies
                if name not in enum_names and name in known_names and name != node.name
            ]
        return model

"""
model_transform_pipeline.py
Defines a pipeline for transforming SpecModel objects using a sequence of ModelTransform objects.
"""
from typing import List, Protocol
from spec_model import SpecModel

from model_transforms.dedup_enumerations_transform import DedupEnumerationsTransform
from model_transforms.rename_enumerations_transform import RenameEnumerationsTransform
from model_transforms.normalize_enum_values_transform import NormalizeEnumValuesTransform
from model_transforms.remove_denylisted_types_transform import RemoveDenylistedTypesTransform
from model_transforms.remove_duplicate_types_transform import RemoveDuplicateTypesTransform
from model_transforms.prune_dependencies_transform import PruneDependenciesTransform


class ModelTransform(Protocol):
    def transform(self, model: SpecModel) -> SpecModel:
        ...


def default_cleanup_transforms() -> List[ModelTransform]:
    """The cleanup pass, in the order the steps must run."""
    return [
        DedupEnumerationsTransform(),
        RenameEnumerationsTransform(),
        NormalizeEnumValuesTransform(),
        RemoveDenylistedTypesTransform(),
        RemoveDuplicateTypesTransform(),
        PruneDependenciesTransform(),
    ]


def run_model_transform_pipeline(
    model: SpecModel,
    transforms: List[ModelTransform] = None
) -> SpecModel:
    """
    Applies a sequence of ModelTransform objects to a SpecModel.
    Each transform takes a SpecModel and returns it (possibly the same object, modified).
    Without an explicit list the default cleanup pass is applied.
    """
    if transforms is None:
        transforms = default_cleanup_transforms()
    for transform in transforms:
        model = transform.transform(model)
    return model

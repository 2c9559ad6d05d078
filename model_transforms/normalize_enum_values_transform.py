"""
NormalizeEnumValuesTransform: makes enumeration values usable as C++ enumerators.
Value names get an upper-case first letter. String enumerations lose the quotes
around their wire literal; numeric enumerations get the first letter of their
textual value upper-cased, so symbolic values keep pointing at the renamed enumerators.
"""
from spec_model import SpecModel


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


class NormalizeEnumValuesTransform:
    def transform(self, model: SpecModel) -> SpecModel:
        for enumeration in model.enumerations:
            for value in enumeration.values:
                value.name = capitalize_first(value.name)
                if enumeration.is_string:
                    value.value = value.value.replace("'", "")
                else:
                    value.value = capitalize_first(value.value)
        return model

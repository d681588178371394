"""css_structs model layer -- public type re-exports."""

from css_structs.model.declaration import Declaration
from css_structs.model.declaration_list import DeclarationList
from css_structs.model.rule import Rule
from css_structs.model.stylesheet import Stylesheet

__all__ = [
    "Declaration",
    "DeclarationList",
    "Rule",
    "Stylesheet",
]

"""Registry of special forms for the Risp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application.
"""

from risp.types.symbol import Symbol
from risp.evaluation.special_forms.def_form import def_form
from risp.evaluation.special_forms.fn_form import fn_form
from risp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("def"): def_form,
    Symbol("fn"): fn_form,
    Symbol("if"): if_form,
}

"""Registry of special forms for the schemelet evaluator.

Maps keyword names to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary
procedure application; a handler returns UNMATCHED when the form does not
have a shape it accepts, and the form is then applied like any other list.
"""

from schemelet.evaluation.special_forms.unmatched import UNMATCHED
from schemelet.evaluation.special_forms.quote_forms import quote_form
from schemelet.evaluation.special_forms.if_form import if_form
from schemelet.evaluation.special_forms.set_form import set_form
from schemelet.evaluation.special_forms.define_form import define_form
from schemelet.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
    "set!": set_form,
    "define": define_form,
    "lambda": lambda_form,
}

__all__ = ["SPECIAL_FORMS", "UNMATCHED"]

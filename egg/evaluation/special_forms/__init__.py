"""Registry of special forms for the Egg evaluator.

Maps operator names to handlers that receive their argument nodes
unevaluated, together with the current scope and the evaluator. The table is
read-only; the evaluator consults it before ordinary function application.
"""

from types import MappingProxyType

from egg.evaluation.special_forms.if_form import if_form
from egg.evaluation.special_forms.while_form import while_form
from egg.evaluation.special_forms.do_form import do_form
from egg.evaluation.special_forms.define_form import define_form
from egg.evaluation.special_forms.set_form import set_form
from egg.evaluation.special_forms.fun_form import fun_form

SPECIAL_FORMS = MappingProxyType({
    "if": if_form,
    "while": while_form,
    "do": do_form,
    "define": define_form,
    "set": set_form,
    "fun": fun_form,
})

"""Registry of statement forms for the Rustl executor.

Maps AST statement node types to the handler that executes them. The executor
consults this table for every statement it runs.
"""

from rustl.syntax.ast import (
    Assignment,
    CompoundAssignment,
    ExpressionStatement,
    For,
    FunctionDefinition,
    If,
    Import,
    While,
)
from rustl.evaluation.statement_forms.expression_form import expression_form
from rustl.evaluation.statement_forms.assign_form import assign_form, compound_assign_form
from rustl.evaluation.statement_forms.if_form import if_form
from rustl.evaluation.statement_forms.loop_forms import while_form, for_form
from rustl.evaluation.statement_forms.define_form import define_form
from rustl.evaluation.statement_forms.import_form import import_form

STATEMENT_FORMS = {
    ExpressionStatement: expression_form,
    Assignment: assign_form,
    CompoundAssignment: compound_assign_form,
    If: if_form,
    While: while_form,
    For: for_form,
    FunctionDefinition: define_form,
    Import: import_form,
}

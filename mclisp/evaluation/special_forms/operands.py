from mclisp import SExpression
from mclisp.types.errors import McLispArityError, McLispTypeError
from mclisp.types.nil import Nil
from mclisp.types.pair import Pair


def operands(args: SExpression, count: int, form: str) -> list[SExpression]:
    """Unpack the operand list of a form, which must hold exactly `count` items."""
    items: list[SExpression] = []
    cell = args
    while isinstance(cell, Pair):
        items.append(cell.car)
        cell = cell.cdr
    if cell is not Nil:
        raise McLispTypeError(f"{form}: operand list is not a proper list")
    if len(items) != count:
        plural = "argument" if count == 1 else "arguments"
        raise McLispArityError(
            f"{form} expects exactly {count} {plural}, got {len(items)}"
        )
    return items

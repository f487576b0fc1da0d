"""
Elision of generic arguments that equal their declared defaults.

``HashMap<K, V, RandomState>`` prints as ``HashMap<K, V>`` because the third
argument is exactly what the declaration would have supplied.
"""

from __future__ import annotations

import logging
from typing import Callable

from tyrender.ty.context import TypeContext
from tyrender.ty.fold import has_self_ty, subst
from tyrender.ty.generics import Generics
from tyrender.ty.subst import ParamSpace, Substs
from tyrender.utils.errors import ItemLookupError, SubstitutionError

logger = logging.getLogger(__name__)

GenericsAccessor = Callable[[TypeContext], Generics]


def number_of_supplied_defaults(
    ctx: TypeContext,
    substs: Substs,
    space: ParamSpace,
    get_generics: GenericsAccessor,
) -> int:
    """
    Count the trailing type arguments of ``space`` that may be left out.

    The scan runs from the last parameter backwards and stops at the first
    parameter that has no default, whose default mentions ``Self`` while
    there is no receiver to substitute, or whose substituted default differs
    from the actual argument.

    Must not be called in verbose mode: fetching generics can force item
    collection the caller may not be ready for.
    """
    try:
        generics = get_generics(ctx)
    except ItemLookupError as e:
        logger.debug("no generics for default elision: %s", e)
        return 0

    has_self = substs.self_ty() is not None
    ty_params = generics.types.get_slice(space)
    tps = substs.types.get_slice(space)
    if not ty_params or ty_params[-1].default is None:
        return 0

    lifted = ctx.lift(substs)
    count = 0
    for param, actual in reversed(list(zip(ty_params, tps))):
        default = param.default
        if default is None:
            break
        if not has_self and has_self_ty(default):
            # Self-referencing defaults stay explicit without a receiver.
            break
        if lifted is None:
            break
        lifted_default = ctx.lift(default)
        if lifted_default is None:
            break
        try:
            expected = subst(lifted_default, lifted)
        except SubstitutionError as e:
            logger.debug("default of %s not substitutable: %s", param.name, e)
            break
        if expected != actual:
            break
        count += 1
    return count

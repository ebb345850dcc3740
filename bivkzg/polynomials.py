"""Bivariate polynomials over the BLS12-381 scalar field.

Field elements are plain integers reduced modulo :data:`FIELD_MODULUS`.
Polynomials come in two forms: a :class:`SparsePolynomial` in any number of
variables, and a "monomial list" of ``(i, j, coeff)`` tuples standing for
``coeff * x**i * y**j``.
"""

from __future__ import annotations

import random
from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import Dict, List, Tuple

FIELD_MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

BivariateMonomial = Tuple[int, int]
BivariateMonomialList = List[Tuple[int, int, int]]
Term = Tuple[Tuple[int, int], ...]


def fr(value: int) -> int:
    """Reduce an integer to its canonical representative in the scalar field."""
    return value % FIELD_MODULUS


def random_scalar(rng: random.Random) -> int:
    """Draw a uniformly random field element from ``rng``."""
    return rng.randrange(FIELD_MODULUS)


def _normalize_term(exponents: Iterable[Tuple[int, int]]) -> Term:
    powers: Dict[int, int] = defaultdict(int)
    for var, power in exponents:
        powers[var] += power
    return tuple(sorted((var, power) for var, power in powers.items() if power))


def _term_degree(term: Term) -> int:
    return sum(power for _, power in term)


class SparsePolynomial:
    """A multivariate polynomial stored as a map from terms to nonzero coefficients.

    A term is a sorted tuple of ``(variable, power)`` pairs with nonzero powers.
    """

    def __init__(self, num_vars: int, terms: Iterable[Tuple[int, Iterable[Tuple[int, int]]]] = ()):
        self.num_vars = num_vars
        combined: Dict[Term, int] = defaultdict(int)
        for coeff, exponents in terms:
            term = _normalize_term(exponents)
            if any(var >= num_vars for var, _ in term):
                raise ValueError("term uses a variable beyond the number of indeterminates")
            combined[term] = (combined[term] + coeff) % FIELD_MODULUS
        self._terms: Dict[Term, int] = {t: c for t, c in combined.items() if c}

    @property
    def terms(self) -> List[Tuple[int, Term]]:
        """The nonzero ``(coeff, term)`` pairs, ordered by degree then term."""
        ordered = sorted(self._terms, key=lambda t: (_term_degree(t), t))
        return [(self._terms[t], t) for t in ordered]

    def is_zero(self) -> bool:
        return not self._terms

    def degree(self) -> int:
        """Maximum total degree of any term; 0 for the zero polynomial."""
        return max((_term_degree(t) for t in self._terms), default=0)

    def evaluate(self, point: Sequence[int]) -> int:
        """Evaluate the polynomial at ``point`` (one value per variable)."""
        if len(point) < self.num_vars:
            raise ValueError("point has fewer coordinates than the polynomial has variables")
        total = 0
        for term, coeff in self._terms.items():
            value = coeff
            for var, power in term:
                value = value * pow(point[var], power, FIELD_MODULUS) % FIELD_MODULUS
            total += value
        return total % FIELD_MODULUS

    def __add__(self, other: object) -> "SparsePolynomial":
        if not isinstance(other, SparsePolynomial):
            return NotImplemented
        pairs = [(c, t) for t, c in self._terms.items()]
        pairs += [(c, t) for t, c in other._terms.items()]
        return SparsePolynomial(max(self.num_vars, other.num_vars), pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparsePolynomial):
            return NotImplemented
        return self.num_vars == other.num_vars and self._terms == other._terms

    def __hash__(self) -> int:
        return hash((self.num_vars, frozenset(self._terms.items())))

    def __repr__(self) -> str:
        return f"SparsePolynomial(num_vars={self.num_vars}, terms={self.terms!r})"


def _sorted_monomials(coeffs: Dict[BivariateMonomial, int]) -> BivariateMonomialList:
    return sorted((i, j, c % FIELD_MODULUS) for (i, j), c in coeffs.items())


def _pad_total_degree(coeffs: Dict[BivariateMonomial, int], max_total_deg: int) -> None:
    for i in range(max_total_deg + 1):
        for j in range(max_total_deg - i + 1):
            coeffs.setdefault((i, j), 0)


def monomial_list_to_sparsepoly(monomials: BivariateMonomialList) -> SparsePolynomial:
    """Convert ``(i, j, coeff)`` monomials to a two-variable :class:`SparsePolynomial`."""
    return SparsePolynomial(2, [(c, ((0, i), (1, j))) for i, j, c in monomials])


def _combine_monomials(
    poly1: BivariateMonomialList, poly2: BivariateMonomialList, sign: int
) -> BivariateMonomialList:
    coeffs: Dict[BivariateMonomial, int] = {}
    max_total_deg = 0
    for i, j, c in poly1:
        coeffs[(i, j)] = (coeffs.get((i, j), 0) + c) % FIELD_MODULUS
        max_total_deg = max(max_total_deg, i + j)
    for i, j, c in poly2:
        coeffs[(i, j)] = (coeffs.get((i, j), 0) + sign * c) % FIELD_MODULUS
        max_total_deg = max(max_total_deg, i + j)
    _pad_total_degree(coeffs, max_total_deg)
    return _sorted_monomials(coeffs)


def add_polys_monomials(
    poly1: BivariateMonomialList, poly2: BivariateMonomialList
) -> BivariateMonomialList:
    """Sum of two monomial lists, padded to the full total-degree support and sorted."""
    return _combine_monomials(poly1, poly2, 1)


def subtract_polys_monomials(
    poly1: BivariateMonomialList, poly2: BivariateMonomialList
) -> BivariateMonomialList:
    """``poly1 - poly2``, padded to the full total-degree support and sorted."""
    return _combine_monomials(poly1, poly2, -1)


def subtract_value_from_poly_monomials(
    f_monomials: BivariateMonomialList, v: int
) -> BivariateMonomialList:
    """Return the monomials of ``f - v``, sorted by x then y."""
    result = list(f_monomials)
    position = next(
        (pos for pos, (i, j, _) in enumerate(result) if i == 0 and j == 0), None
    )
    if position is None:
        result.append((0, 0, fr(-v)))
    else:
        _, _, coeff = result[position]
        result[position] = (0, 0, fr(coeff - v))
    result.sort(key=lambda m: (m[0], m[1]))
    return result


def multiply_bivariate_polys_monomials(
    poly1: BivariateMonomialList, poly2: BivariateMonomialList
) -> BivariateMonomialList:
    """Product of two monomial lists, padded to the full total-degree support and sorted."""
    coeffs: Dict[BivariateMonomial, int] = defaultdict(int)
    for i1, j1, c1 in poly1:
        for i2, j2, c2 in poly2:
            key = (i1 + i2, j1 + j2)
            coeffs[key] = (coeffs[key] + c1 * c2) % FIELD_MODULUS
    max_total_deg = max((i + j for i, j in coeffs), default=0)
    result = dict(coeffs)
    _pad_total_degree(result, max_total_deg)
    return _sorted_monomials(result)


def evaluate_bivariate(poly: BivariateMonomialList, u1: int, u2: int) -> int:
    """Evaluate a monomial list at ``(u1, u2)``."""
    return (
        sum(c * pow(u1, i, FIELD_MODULUS) * pow(u2, j, FIELD_MODULUS) for i, j, c in poly)
        % FIELD_MODULUS
    )


def _max_total_degree(monomials: BivariateMonomialList) -> int:
    return max((i + j for i, j, _ in monomials), default=0)


def divide_by_linear_in_x(
    g_monomials: BivariateMonomialList, u1: int
) -> Tuple[BivariateMonomialList, BivariateMonomialList]:
    """Divide ``g(x, y)`` by ``(x - u1)``, returning quotient and remainder.

    The remainder has no x-dependence left, and is padded to the total degree of ``g``.
    """
    dividend: Dict[BivariateMonomial, int] = {(i, j): c % FIELD_MODULUS for i, j, c in g_monomials}
    quotient: Dict[BivariateMonomial, int] = {}

    while True:
        candidates = [key for key, c in dividend.items() if key[0] > 0 and c]
        if not candidates:
            break
        i, j = max(candidates)
        coeff = dividend.pop((i, j))
        quotient[(i - 1, j)] = coeff
        dividend[(i - 1, j)] = (dividend.get((i - 1, j), 0) + coeff * u1) % FIELD_MODULUS

    _pad_total_degree(dividend, _max_total_degree(g_monomials))
    return _sorted_monomials(quotient), _sorted_monomials(dividend)


def divide_by_linear_in_y(g_monomials: BivariateMonomialList, u2: int) -> BivariateMonomialList:
    """Divide ``g(x, y)`` by ``(y - u2)`` and return the quotient.

    The quotient is padded to total degree one less than that of ``g``.
    """
    dividend: Dict[BivariateMonomial, int] = {(i, j): c % FIELD_MODULUS for i, j, c in g_monomials}
    quotient: Dict[BivariateMonomial, int] = {}

    while True:
        candidates = [key for key, c in dividend.items() if key[1] > 0 and c]
        if not candidates:
            break
        i, j = max(candidates, key=lambda key: (key[1], key[0]))
        coeff = dividend.pop((i, j))
        quotient[(i, j - 1)] = coeff
        dividend[(i, j - 1)] = (dividend.get((i, j - 1), 0) + coeff * u2) % FIELD_MODULUS

    _pad_total_degree(quotient, _max_total_degree(g_monomials) - 1)
    return _sorted_monomials(quotient)


def random_bivariate_polynomial(
    rng: random.Random, degree: int
) -> Tuple[SparsePolynomial, BivariateMonomialList]:
    """Random polynomial with a coefficient for every ``x^i y^j`` with ``i + j <= degree``."""
    monomials: BivariateMonomialList = [
        (i, j, random_scalar(rng))
        for i in range(degree + 1)
        for j in range(degree + 1)
        if i + j <= degree
    ]
    return monomial_list_to_sparsepoly(monomials), monomials


def multiply_bivariate_polynomials(
    poly1: SparsePolynomial, poly2: SparsePolynomial
) -> SparsePolynomial:
    """Product of two sparse polynomials; zero coefficients are dropped."""
    products = [
        (c1 * c2, term1 + term2)
        for c1, term1 in poly1.terms
        for c2, term2 in poly2.terms
    ]
    return SparsePolynomial(poly1.num_vars, products)
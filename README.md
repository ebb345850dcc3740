# bivkzg

Pure-Python arithmetic on bivariate polynomials over the BLS12-381 scalar
field Fr. It covers the polynomial side of a KZG commitment scheme for
polynomials `f(x, y)`: evaluation, and splitting `f - v` as
`q1·(x - u1) + q2·(y - u2)`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Field elements

Field elements are plain Python integers. `FIELD_MODULUS` is the order of
the BLS12-381 scalar field.

- `fr(value)` reduces an integer to its canonical representative.
- `random_scalar(rng)` draws a uniform element using a `random.Random`.

## Monomial lists

A monomial list is a list of `(i, j, coeff)` tuples standing for
`coeff * x**i * y**j`. All functions in `bivkzg.polynomials` return
coefficients already reduced modulo `FIELD_MODULUS`.

- `add_polys_monomials(poly1, poly2)` returns the sum.
- `subtract_polys_monomials(poly1, poly2)` returns `poly1 - poly2`.
- `multiply_bivariate_polys_monomials(poly1, poly2)` returns the product.

These three results are padded with zero coefficients. The padding covers
every `(i, j)` with `i + j` up to the result's total degree. The result is
sorted by `i`, then `j`.

- `subtract_value_from_poly_monomials(f_monomials, v)` subtracts `v` from
  the constant term. If there is no constant term, it adds one. The result
  is sorted but not padded.
- `evaluate_bivariate(poly, u1, u2)` evaluates at `(u1, u2)`.
- `divide_by_linear_in_x(g_monomials, u1)` divides by `(x - u1)`. It
  returns `(quotient, remainder)`. The remainder has no x-dependence and is
  padded to the total degree of `g`.
- `divide_by_linear_in_y(g_monomials, u2)` divides by `(y - u2)`. It
  returns the quotient, padded to one less than the total degree of `g`.
- `random_bivariate_polynomial(rng, degree)` draws a random coefficient for
  every `x^i y^j` with `i + j <= degree`. It returns a pair: a
  `SparsePolynomial` and the matching monomial list.

## SparsePolynomial

`SparsePolynomial(num_vars, terms)` is a polynomial in any number of
variables. It takes `terms`, an iterable of `(coeff, exponents)`, where
`exponents` holds `(variable, power)` pairs. Like terms are combined, and
zero coefficients are dropped. Using a variable index of `num_vars` or
more raises `ValueError`.

- `terms` lists the nonzero `(coeff, term)` pairs, ordered by degree.
- `degree()` gives the maximum total degree, and 0 for the zero polynomial.
- `evaluate(point)` evaluates the polynomial. It raises `ValueError` if
  `point` is too short.
- `is_zero()`, `+`, `==` and `hash()` are also supported.

Two conversion helpers work with this type:

- `monomial_list_to_sparsepoly(monomials)` converts a monomial list to a
  two-variable `SparsePolynomial`.
- `multiply_bivariate_polynomials(poly1, poly2)` multiplies two
  `SparsePolynomial`s.

## Example

```python
from bivkzg.polynomials import (
    add_polys_monomials,
    divide_by_linear_in_x,
    divide_by_linear_in_y,
    evaluate_bivariate,
    fr,
    multiply_bivariate_polys_monomials,
    subtract_value_from_poly_monomials,
)

f = [(0, 0, 1), (0, 1, 2), (1, 0, 1)]  # 1 + 2y + x
u1, u2 = 2, 3
v = evaluate_bivariate(f, u1, u2)       # 9

g = subtract_value_from_poly_monomials(f, v)
q1, r = divide_by_linear_in_x(g, u1)
q2 = divide_by_linear_in_y(r, u2)

x_minus_u1 = [(0, 0, fr(-u1)), (0, 1, 0), (1, 0, 1)]
y_minus_u2 = [(0, 0, fr(-u2)), (0, 1, 1), (1, 0, 0)]
left = multiply_bivariate_polys_monomials(x_minus_u1, q1)
right = multiply_bivariate_polys_monomials(y_minus_u2, q2)
assert add_polys_monomials(left, right) == g
```

## What this package does not do

The package has no elliptic-curve groups and no pairing. It has no
commitment setup, commit, proof or verification step either. It provides
only the scalar-field polynomial arithmetic that such a scheme is built on.
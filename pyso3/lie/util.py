import casadi as ca

x = ca.SX.sym("x")
eps = ca.SX.sym("eps")  # switch point for the taylor series, passed at call time

# casadi functions evaluate the taylor switch in one expression and also accept
# SX arguments, so the same coefficients serve numeric and symbolic callers
series_dict = {}

# sin(x)/x
series_dict["sin(x)/x"] = ca.Function(
    "a",
    [x, eps],
    [ca.if_else(ca.fabs(x) > eps, ca.sin(x) / x, 1 - x**2 / 6)],
)

# (1 - cos(x))/x^2, written with the half angle to avoid cancellation
series_dict["(1 - cos(x))/x^2"] = ca.Function(
    "b",
    [x, eps],
    [ca.if_else(ca.fabs(x) > eps, 2 * ca.sin(x / 2) ** 2 / x**2, 0.5 - x**2 / 24)],
)

# delete temp variables used to create functions
del x
del eps


def series(name, value, eps):
    """
    Evaluate a coefficient function numerically.

    :param name: key in series_dict
    :param value: the argument, a real number
    :param eps: below this magnitude the taylor series is used
    :return: the coefficient as a float
    """
    return float(series_dict[name](float(value), float(eps)))

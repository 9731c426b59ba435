"""
Statistical distributions module.

Density, cumulative and quantile functions for five families, built by
composing calculus.integrate (incomplete integrals) and optimize.fzero
(quantile inversion) with closed-form special-function approximations.

Every function takes and returns plain floats. Parameter validity
(positive shapes, degrees of freedom, scales) is a precondition and is
not checked.

Public API:
    Normal:    s_normpdf, normpdf, s_normcdf, normcdf, s_norminv, norminv
    Gamma:     gamma, lowincgamma, uppincgamma, regincgamma,
               gammapdf, gammacdf, gammainv
    Beta:      beta, incbet, regincbet, betapdf, betacdf, betainv
    Student t: tpdf, tcdf, tinv
    Chi^2:     chi2pdf, chi2cdf, chi2inv
"""

from pynumerics.distributions._normal import (
    s_normpdf, normpdf, s_normcdf, normcdf, s_norminv, norminv,
)
from pynumerics.distributions._special import (
    gamma, beta, incbet, regincbet, gamma_integral,
)
from pynumerics.distributions._gamma import (
    lowincgamma, uppincgamma, regincgamma, gammapdf, gammacdf, gammainv,
)
from pynumerics.distributions._beta import betapdf, betacdf, betainv
from pynumerics.distributions._t import tpdf, tcdf, tinv
from pynumerics.distributions._chi2 import chi2pdf, chi2cdf, chi2inv

__all__ = [
    # Normal
    "s_normpdf",
    "normpdf",
    "s_normcdf",
    "normcdf",
    "s_norminv",
    "norminv",
    # Gamma
    "gamma",
    "gamma_integral",
    "lowincgamma",
    "uppincgamma",
    "regincgamma",
    "gammapdf",
    "gammacdf",
    "gammainv",
    # Beta
    "beta",
    "incbet",
    "regincbet",
    "betapdf",
    "betacdf",
    "betainv",
    # Student t
    "tpdf",
    "tcdf",
    "tinv",
    # Chi-squared
    "chi2pdf",
    "chi2cdf",
    "chi2inv",
]

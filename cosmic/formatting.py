"""Plain-text rendering of a cosmology and its redshift quantities.

Three forms are produced:
- a one-line parameter summary
- a header line plus delimited rows, for tab- or comma-separated tables
- a multi-line human-readable report
"""

from typing import Optional

from .distances import RedshiftRecord
from .parameters import ParameterSet, OMEGA_K_EPSILON
from .utils.config import DEFAULT_CONFIG
from .utils.constants import seconds_to_gyr


def format_number(value: float) -> str:
    """Shortest round-trip text for a float, without a trailing '.0'."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def show_transverse(record: RedshiftRecord, flat_tol: float = DEFAULT_CONFIG.flat_tol) -> bool:
    """Whether d_M differs enough from d_C to be reported separately."""
    return abs(record.d_C - record.d_M) > flat_tol


def format_parameters(params: ParameterSet, leader: str = "") -> str:
    """Format the cosmological parameters on a single line.

    Omega_k is included only for a curved universe. No line terminator.
    """
    text = (
        f"{leader}H_0 = {format_number(params.H0)}, "
        f"Omega_m = {format_number(params.Omega_m)}, "
        f"Omega_L = {format_number(params.Omega_Lambda)}"
    )
    if abs(params.Omega_k) > OMEGA_K_EPSILON:
        text += f", Omega_k = {format_number(params.Omega_k)}"
    text += f" (q_0 = {format_number(params.q0)})"
    return text


def format_header(
    params: ParameterSet,
    record: RedshiftRecord,
    leader: str,
    separator: str,
    flat_tol: float = DEFAULT_CONFIG.flat_tol,
    include_transverse: Optional[bool] = None,
) -> str:
    """Header for a text or CSV table: parameter line, then column names.

    The two lines are joined by a newline; there is no trailing terminator.
    The d_T column follows ``include_transverse`` when given, otherwise
    whether the record's d_M differs from d_C.
    """
    if include_transverse is None:
        include_transverse = show_transverse(record, flat_tol)

    columns = ["z", "age", "t_L", "d_A", "d_L", "d_C"]
    if include_transverse:
        columns.append("d_T")
    columns += ["V_C", "rho_crit", 'kpc/"', '"/kpc']
    return format_parameters(params, leader) + "\n" + leader + separator.join(columns)


def format_row(
    params: ParameterSet,
    record: RedshiftRecord,
    separator: str,
    flat_tol: float = DEFAULT_CONFIG.flat_tol,
    include_transverse: Optional[bool] = None,
) -> str:
    """One table row of the quantities derived from the redshift.

    Ages and lookback times are in Gyr, distances in Mpc, volume in Gpc³,
    critical density in g/cm³.
    """
    if include_transverse is None:
        include_transverse = show_transverse(record, flat_tol)

    values = [
        f"{record.z:.2f}",
        f"{seconds_to_gyr(params.age - record.t_L):.6f}",
        f"{seconds_to_gyr(record.t_L):.6f}",
        f"{record.d_A:.6f}",
        f"{record.d_L:.6f}",
        f"{record.d_C:.6f}",
    ]
    if include_transverse:
        values.append(f"{record.d_M:.6f}")
    values += [
        f"{record.V_C:.6f}",
        f"{record.rho_crit:.4e}",
        f"{record.kpc_per_arcsec:.6f}",
        f"{record.arcsec_per_kpc:.6f}",
    ]
    return separator.join(values)


def format_report(
    params: ParameterSet,
    record: RedshiftRecord,
    flat_tol: float = DEFAULT_CONFIG.flat_tol,
) -> str:
    """Multi-line report of the cosmology and the quantities at z."""
    lines = [
        format_parameters(params),
        f"At z = {format_number(record.z)}",
        f"  age of the Universe at z      = {seconds_to_gyr(params.age - record.t_L):.6f} Gyr",
        f"  lookback time to z            = {seconds_to_gyr(record.t_L):.6f} Gyr",
        f"  angular diameter distance d_A = {record.d_A:.6f} Mpc",
        f"  luminosity distance d_L       = {record.d_L:.6f} Mpc",
        f"  comoving radial distance d_C  = {record.d_C:.6f} Mpc",
    ]
    if show_transverse(record, flat_tol):
        lines.append(f"  comoving transverse distance  = {record.d_M:.6f} Mpc")
    lines += [
        f"  comoving volume out to z      = {record.V_C:.6f} Gpc^3",
        f"  critical density at z         = {record.rho_crit:.6e} g cm^-3",
        f'  1"  = {record.kpc_per_arcsec:.6f} kpc',
        f'  1kpc = {record.arcsec_per_kpc:.6f} "',
    ]
    return "\n".join(lines)

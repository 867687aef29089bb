"""Constantes legales centralizadas según la Ley Federal del Trabajo (LFT) México.

Este módulo agrupa los parámetros numéricos y tablas derivados de la LFT
para uso en cálculos de finiquito, liquidación y riesgo de juicio.
Todas las constantes documentan el artículo de la LFT que las sustenta,
o su origen cuando son factores de calibración y no mandato legal.
"""

from types import MappingProxyType
from typing import Final, Mapping

# ---------------------------------------------------------------------------
# Convenciones de cálculo
# ---------------------------------------------------------------------------
"""Divisor anual fijo (no 365.25) para antigüedad y proporcionales."""
DIAS_POR_ANIO: Final[int] = 365

"""Días por mes para convertir montos mensuales a diarios."""
DIAS_POR_MES: Final[int] = 30

# ---------------------------------------------------------------------------
# Art. 87 LFT — Aguinaldo
# Los trabajadores tendrán derecho a una gratificación anual de al menos
# 15 días de salario. Quienes no hayan cumplido el año tendrán derecho
# a la parte proporcional.
# ---------------------------------------------------------------------------
"""Art. 87 LFT: Días mínimos de aguinaldo anual."""
DIAS_AGUINALDO: Final[int] = 15

# ---------------------------------------------------------------------------
# Art. 80 LFT — Prima vacacional
# Los trabajadores tendrán derecho a una prima no menor de 25% sobre
# los salarios que les correspondan durante el período de vacaciones.
# ---------------------------------------------------------------------------
"""Art. 80 LFT: Porcentaje mínimo de prima vacacional (escala 0-100)."""
PORCENTAJE_PRIMA_VACACIONAL: Final[float] = 25.0

# ---------------------------------------------------------------------------
# Art. 48 LFT y Art. 123 Constitucional — Indemnización por despido
# Tres meses de salario integrado (90 días) más, en su caso, 20 días
# por año de servicios (Art. 50 fr. II, negociable en convenio).
# ---------------------------------------------------------------------------
"""Art. 48 LFT: Días de salario integrado por indemnización constitucional."""
INDEMNIZACION_CONSTITUCIONAL_DIAS: Final[int] = 90

"""Art. 50 LFT: Días de salario integrado por cada año de servicios."""
INDEMNIZACION_DIAS_POR_ANIO: Final[int] = 20

# ---------------------------------------------------------------------------
# Art. 162 LFT — Prima de antigüedad
# Los trabajadores de planta tienen derecho a una prima por antigüedad de
# 12 días de salario por cada año de servicios. El salario base no podrá
# exceder del doble del salario mínimo (Art. 485 y 486).
# ---------------------------------------------------------------------------
"""Art. 162 LFT: Días de salario por año para prima de antigüedad."""
PRIMA_ANTIGUEDAD_DIAS_POR_ANIO: Final[int] = 12

"""Art. 162 LFT: Tope de prima de antigüedad (veces el salario mínimo)."""
PRIMA_ANTIGUEDAD_TOPE_VECES_SALARIO_MINIMO: Final[int] = 2

"""Salario mínimo general 2024 (CONASAMI), valor por defecto."""
SALARIO_MINIMO_GENERAL: Final[float] = 248.93

# ---------------------------------------------------------------------------
# Art. 48 LFT — Salarios vencidos (estimación de riesgo en juicio)
# Hasta 12 meses de salarios vencidos; después, intereses del 2% mensual
# sobre 15 meses de salario. La estimación es conservadora y no vinculante.
# ---------------------------------------------------------------------------
"""Art. 48 LFT: Días de salarios vencidos estimados (un año)."""
SALARIOS_VENCIDOS_DIAS: Final[int] = 365

"""Art. 48 LFT: Meses de salario que sirven de base a los intereses."""
INTERESES_MESES_BASE: Final[int] = 15

"""Art. 48 LFT: Tasa de interés mensual sobre la base de 15 meses."""
INTERESES_TASA_MENSUAL: Final[float] = 0.02

"""Meses de intereses estimados para un juicio largo."""
INTERESES_MESES_ESTIMADOS: Final[int] = 12

# ---------------------------------------------------------------------------
# Factores de calibración financiera (no son mandato LFT)
# Derivados de un caso real: costo nómina 33,400 / bruto 25,000 / neto 20,700.
# ---------------------------------------------------------------------------
"""Costo de nómina mensual / sueldo bruto mensual (carga social ~33.6%)."""
FACTOR_COSTO_A_BRUTO: Final[float] = 1.336

"""Costo de nómina mensual / sueldo neto mensual."""
FACTOR_COSTO_A_NETO: Final[float] = 1.6135

"""Sueldo neto / sueldo bruto (retención ISR + IMSS obrero ~17.2%)."""
FACTOR_NETO_SOBRE_BRUTO: Final[float] = 0.828

# ---------------------------------------------------------------------------
# Vacaciones Dignas (reforma LFT, en vigor desde 2023) — Art. 76
# Tabla progresiva de días de vacaciones según años de antigüedad.
# Años 1-5: 12, 14, 16, 18, 20 días; después +2 días cada 5 años (máx. 32).
# ---------------------------------------------------------------------------
# Construcción de la tabla: 1→12, 2→14, 3→16, 4→18, 5→20;
# 6-10→22, 11-15→24, 16-20→26, 21-25→28, 26-30→30, 31+→32
_VACACIONES_BASE: list[tuple[int, int]] = [
    (1, 12),
    (2, 14),
    (3, 16),
    (4, 18),
    (5, 20),
]
_VACACIONES_RANGOS: list[tuple[int, int]] = [
    (10, 22),
    (15, 24),
    (20, 26),
    (25, 28),
    (30, 30),
]

"""Art. 76 LFT: Días de vacaciones a partir del año 31 (meseta)."""
VACACIONES_DIAS_MAXIMO: Final[int] = 32


def _build_vacaciones_dignas_dict() -> dict[int, int]:
    """Construye el diccionario año -> días de vacaciones (Vacaciones Dignas)."""
    result: dict[int, int] = {}
    for anio, dias in _VACACIONES_BASE:
        result[anio] = dias
    ultimo_anio = _VACACIONES_BASE[-1][0]
    for tope_anio, dias in _VACACIONES_RANGOS:
        for anio in range(ultimo_anio + 1, tope_anio + 1):
            result[anio] = dias
        ultimo_anio = tope_anio
    return result


"""Tabla de días de vacaciones por año de antigüedad (años 1 a 30)."""
VACACIONES_DIGNAS: Final[Mapping[int, int]] = MappingProxyType(_build_vacaciones_dignas_dict())


def dias_vacaciones(anio_servicio: int) -> int:
    """Días de vacaciones que corresponden al año de servicio indicado.

    Años menores a 1 reciben el primer escalón (12 días); a partir del
    año 31 se aplica la meseta de 32 días.
    """
    if anio_servicio < 1:
        return VACACIONES_DIGNAS[1]
    return VACACIONES_DIGNAS.get(anio_servicio, VACACIONES_DIAS_MAXIMO)

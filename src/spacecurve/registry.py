"""
Registry — центральная таблица семейств кривых

Единственное место, где ключ кривой связывается с конструктором, правилом
валидации и описанием для документации/списков. Порядок регистрации
стабилен и определяет порядок CURVE_NAMES.

Потребители (CLI, GUI) используют:
- construct / validate по ключу
- curve_names(include_experimental) для списков выбора
- describe() для вывода каталога (JSON контракт curve_catalog)
- resolve_size() для подбора ближайшего допустимого размера стороны
- curve_from_request() для JSON запроса (контракт curve_request)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Final

from spacecurve.core.contracts.validators import (
    validate_curve_catalog,
    validate_curve_request,
)
from spacecurve.core.domain.grid_spec import MAX_LENGTH
from spacecurve.core.errors import ShapeError, SizeError, SpaceCurveError
from spacecurve.curves import (
    GrayCurve,
    HairyOnion,
    HCurve,
    Hilbert,
    Onion,
    Scan,
    SpaceCurve,
    ZOrder,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENTRIES
# =============================================================================


@dataclass(frozen=True)
class CurveEntry:
    """Запись реестра."""

    # Ключ для CLI и конфигураций
    key: str

    # Отображаемое имя
    display: str

    # Ограничения на (dimension, size) в человекочитаемом виде
    constraints: str

    # (dimension, size) -> экземпляр кривой
    constructor: Callable[[int, int], SpaceCurve]

    # (dimension, size) -> None, бросает ShapeError/SizeError
    validator: Callable[[int, int], None]

    # Экспериментальные кривые скрываются из списков по умолчанию
    experimental: bool = False


def _grid_validator(curve_cls) -> Callable[[int, int], None]:
    def check(dimension: int, size: int) -> None:
        curve_cls.grid_spec(dimension, size)

    return check


REGISTRY: Final[tuple[CurveEntry, ...]] = (
    CurveEntry(
        key="hilbert",
        display="Hilbert",
        constraints="dimension >= 2; size = 2^order; order * dimension < 32",
        constructor=Hilbert.from_dimensions,
        validator=_grid_validator(Hilbert),
    ),
    CurveEntry(
        key="zorder",
        display="Z-order",
        constraints="dimension >= 1; size = 2^order; order * dimension < 32",
        constructor=ZOrder.from_dimensions,
        validator=_grid_validator(ZOrder),
    ),
    CurveEntry(
        key="gray",
        display="Gray code",
        constraints="dimension >= 1; size = 2^order; order * dimension < 32",
        constructor=GrayCurve.from_dimensions,
        validator=_grid_validator(GrayCurve),
    ),
    CurveEntry(
        key="hcurve",
        display="H-curve",
        constraints="2 <= dimension < 32; size = 2^order; order * dimension < 32",
        constructor=HCurve.from_dimensions,
        validator=_grid_validator(HCurve),
    ),
    CurveEntry(
        key="scan",
        display="Scan",
        constraints="dimension >= 1; size >= 1; size^dimension < 2^32",
        constructor=Scan.from_dimensions,
        validator=_grid_validator(Scan),
    ),
    CurveEntry(
        key="onion",
        display="Onion",
        constraints="dimension >= 2; size >= 1; size^dimension < 2^32",
        constructor=Onion.from_dimensions,
        validator=_grid_validator(Onion),
    ),
    CurveEntry(
        key="hairyonion",
        display="Hairy Onion",
        constraints="dimension >= 2; size >= 1; size^dimension < 2^32",
        constructor=HairyOnion.from_dimensions,
        validator=_grid_validator(HairyOnion),
        experimental=True,
    ),
)

CURVE_NAMES: Final[tuple[str, ...]] = tuple(entry.key for entry in REGISTRY)

_BY_KEY: Final[Dict[str, CurveEntry]] = {entry.key: entry for entry in REGISTRY}


# =============================================================================
# LOOKUP
# =============================================================================


def get_entry(name: str) -> CurveEntry:
    """
    Запись реестра по ключу.

    Raises:
        ShapeError: неизвестный ключ
    """
    try:
        return _BY_KEY[name]
    except KeyError:
        raise ShapeError(
            f"Unknown curve '{name}' (options: {', '.join(CURVE_NAMES)})"
        ) from None


def curve_names(include_experimental: bool = False) -> list[str]:
    """Ключи кривых в порядке регистрации."""
    return [
        entry.key
        for entry in REGISTRY
        if include_experimental or not entry.experimental
    ]


def validate(name: str, dimension: int, size: int) -> None:
    """
    Проверка (name, dimension, size) без построения кривой.

    Raises:
        ShapeError: неизвестный ключ или недопустимая размерность
        SizeError: недопустимый размер
    """
    get_entry(name).validator(dimension, size)


def construct(name: str, dimension: int, size: int) -> SpaceCurve:
    """
    Построение кривой по ключу.

    Args:
        name: Ключ из CURVE_NAMES
        dimension: Размерность
        size: Сторона решётки

    Returns:
        Экземпляр кривой

    Raises:
        ShapeError: неизвестный ключ или недопустимая размерность
        SizeError: недопустимый размер

    Examples:
        >>> construct("hilbert", 2, 8).length()
        64
    """
    entry = get_entry(name)
    curve = entry.constructor(dimension, size)
    logger.debug(
        "Constructed curve %s: dimension=%d size=%d length=%d",
        entry.key,
        dimension,
        size,
        curve.length(),
    )
    return curve


# =============================================================================
# CONSUMER HELPERS
# =============================================================================


def describe() -> list[Dict[str, Any]]:
    """
    Каталог кривых в виде JSON-совместимых словарей.

    Результат проверяется по контракту curve_catalog.
    """
    catalog = [
        {
            "key": entry.key,
            "display": entry.display,
            "constraints": entry.constraints,
            "experimental": entry.experimental,
        }
        for entry in REGISTRY
    ]
    validate_curve_catalog(catalog)
    return catalog


def resolve_size(name: str, dimension: int, requested: int) -> tuple[int, bool]:
    """
    Наименьший допустимый размер стороны >= requested.

    Сначала проверяется сам requested, затем степени двойки выше него.

    Args:
        name: Ключ кривой
        dimension: Размерность
        requested: Желаемый размер стороны (>= 1)

    Returns:
        (size, adjusted): adjusted = True, если size != requested

    Raises:
        ShapeError: неизвестный ключ или недопустимая размерность
        SizeError: requested < 1 или подходящий размер не найден

    Examples:
        >>> resolve_size("hilbert", 2, 100)
        (128, True)
        >>> resolve_size("scan", 2, 100)
        (100, False)
    """
    if requested < 1:
        raise SizeError(f"Size must be >= 1, got {requested}")

    try:
        validate(name, dimension, requested)
        return requested, False
    except SizeError as err:
        last_err: SpaceCurveError = err

    candidate = 1 << requested.bit_length()
    while candidate <= MAX_LENGTH:
        try:
            validate(name, dimension, candidate)
            logger.debug(
                "Adjusted %s size from %d to %d", name, requested, candidate
            )
            return candidate, True
        except SizeError as err:
            last_err = err
            candidate <<= 1

    raise SizeError(
        f"Could not find a valid size >= {requested} for '{name}': {last_err}"
    )


def curve_from_request(data: Dict[str, Any]) -> SpaceCurve:
    """
    Построение кривой по JSON запросу {"curve", "dimension", "size"}.

    Raises:
        jsonschema.ValidationError: запрос не соответствует контракту
        ShapeError / SizeError: недопустимые параметры кривой
    """
    validate_curve_request(data)
    return construct(data["curve"], data["dimension"], data["size"])

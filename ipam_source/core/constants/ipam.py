"""
Константы IPAM: адресные пространства, области видимости, приоритеты пулов.
"""

# Идентификатор локального адресного пространства
LOCAL_DEFAULT_ADDRESS_SPACE_ID = "LocalDefaultAddressSpace"

# Область видимости локального пространства
LOCAL_SCOPE = 0

# Приоритет пула: адреса первичного интерфейса выдаются первыми
PRIORITY_PRIMARY = 0
PRIORITY_SECONDARY = 1

# Имя источника в логах
SOURCE_NAME = "MAS"


def pool_priority(is_primary: bool) -> int:
    """
    Возвращает приоритет пула для интерфейса.

    Args:
        is_primary: Интерфейс помечен как первичный

    Returns:
        int: 0 для первичного, 1 для остальных
    """
    return PRIORITY_PRIMARY if is_primary else PRIORITY_SECONDARY

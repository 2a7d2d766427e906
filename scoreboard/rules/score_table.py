"""Score table - convert han + fu to base points."""


def base_points(han: int, fu: int) -> int:
    """Calculate base points from han and fu.

    Inputs are trusted to be positive integers; callers validate first.
    """
    if han >= 13:
        return 8000  # Yakuman
    if han >= 11:
        return 6000  # Sanbaiman
    if han >= 8:
        return 4000  # Baiman
    if han >= 6:
        return 3000  # Haneman
    if han >= 5:
        return 2000  # Mangan

    # Kiriage mangan: 4 han 30 fu and 3 han 60 fu count as mangan
    if (han == 4 and fu == 30) or (han == 3 and fu == 60):
        return 2000

    base = fu * (2 ** (2 + han))
    if base >= 2000:
        return 2000  # Mangan
    return base


def round_up_100(points: int) -> int:
    return ((points + 99) // 100) * 100


def rank_name(han: int, fu: int) -> str:
    """Localized limit-hand name, or 'N han M fu' below mangan."""
    from scoreboard.ui.i18n import t
    if han >= 13:
        return t('rank.yakuman')
    if han >= 11:
        return t('rank.sanbaiman')
    if han >= 8:
        return t('rank.baiman')
    if han >= 6:
        return t('rank.haneman')
    if base_points(han, fu) >= 2000:
        return t('rank.mangan')
    return t('rank.han_fu', han=han, fu=fu)

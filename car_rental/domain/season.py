"""Temporadas de renta y calendario fijo que las determina."""

from datetime import date
from enum import Enum


class Season(str, Enum):
    """Temporadas posibles; cada una tiene su propia tarifa diaria."""

    PEAK = "PEAK"
    MID = "MID"
    OFF = "OFF"


class SeasonCalendar:
    """
    Mapea una fecha calendario a su temporada.

    Reglas fijas (independientes del año):
    - PEAK: 1 de junio - 15 de septiembre.
    - MID: 16 de septiembre - 31 de octubre y 1 de marzo - 31 de mayo.
    - OFF: 1 de noviembre - 28/29 de febrero.
    """

    PEAK_LAST_SEPTEMBER_DAY = 15

    @classmethod
    def get_season(cls, day: date) -> Season:
        month = day.month

        if month in (6, 7, 8):
            return Season.PEAK
        if month == 9:
            if day.day <= cls.PEAK_LAST_SEPTEMBER_DAY:
                return Season.PEAK
            return Season.MID
        if month in (11, 12, 1, 2):
            return Season.OFF
        # marzo, abril, mayo y octubre
        return Season.MID


def get_season(day: date) -> Season:
    return SeasonCalendar.get_season(day)

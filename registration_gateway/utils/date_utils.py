"""Date manipulation utilities"""

from datetime import date


def calculate_age(date_of_birth: date, today: date) -> int:
    """
    Age in whole years on `today`.

    One year is subtracted while today's (month, day) is still before the
    birthday, so a 29 February birthday counts from 1 March in non-leap years.
    """
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age

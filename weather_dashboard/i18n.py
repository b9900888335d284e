# ABOUTME: Message catalogue for user-visible dashboard strings in English, Russian and Uzbek.
# ABOUTME: translate() falls back to English, then to the key itself.

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "enter_city": "Enter city name",
        "hourly_forecast": "Hourly Forecast",
        "daily_forecast": "Daily Forecast",
        "wind_speed": "Wind Speed",
        "humidity": "Humidity",
        "pressure": "Pressure",
        "uv_index": "UV Index",
        "sunrise": "Sunrise",
        "sunset": "Sunset",
        "error_fetching": "Error fetching weather data",
        "city_not_found": "City not found",
    },
    "ru": {
        "enter_city": "Введите название города",
        "hourly_forecast": "Почасовой прогноз",
        "daily_forecast": "Прогноз по дням",
        "wind_speed": "Скорость ветра",
        "humidity": "Влажность",
        "pressure": "Давление",
        "uv_index": "УФ-индекс",
        "sunrise": "Восход",
        "sunset": "Закат",
        "error_fetching": "Ошибка при получении данных о погоде",
        "city_not_found": "Город не найден",
    },
    "uz": {
        "enter_city": "Shahar nomini kiriting",
        "hourly_forecast": "Soatlik prognoz",
        "daily_forecast": "Kunlik prognoz",
        "wind_speed": "Shamol tezligi",
        "humidity": "Namlik",
        "pressure": "Bosim",
        "uv_index": "UV indeksi",
        "sunrise": "Quyosh chiqishi",
        "sunset": "Quyosh botishi",
        "error_fetching": "Ob-havo ma'lumotlarini olishda xatolik",
        "city_not_found": "Shahar topilmadi",
    },
}

SUPPORTED_LANGUAGES = tuple(TRANSLATIONS)


def translate(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Return the message for key in language, falling back to English and then the key."""
    messages = TRANSLATIONS.get(language, {})
    if key in messages:
        return messages[key]
    return TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key)

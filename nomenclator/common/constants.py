"""Application constants."""

USER_AGENT = "nomenclator/0.3 (+album titles)"
LOCATOR_API_KEY_ENV = "LOCATOR_API_KEY"
WEATHER_API_KEY_ENV = "WEATHER_API_KEY"
POSITIONSTACK_REVERSE_URL = "http://api.positionstack.com/v1/reverse"
VISUAL_CROSSING_TIMELINE_URL = (
    "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline"
)
DEFAULT_WEATHER_ELEMENTS = ("datetime", "datetimeEpoch", "conditions")
WEATHER_UNIT_GROUPS = ("metric", "UK", "US")
PHOTO_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
EXIT_SUCCESS = 0
EXIT_PARTIAL = 10
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "row",
    "resolver",
    "event",
    "status",
    "duration_ms",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)

"""Static catalog of models and languages offered by each speech service."""

WEB_SPEECH_LANGUAGES = [
    {"code": "en-US", "name": "English (US)"},
    {"code": "en-GB", "name": "English (UK)"},
    {"code": "es-ES", "name": "Spanish"},
    {"code": "fr-FR", "name": "French"},
    {"code": "de-DE", "name": "German"},
    {"code": "it-IT", "name": "Italian"},
    {"code": "pt-BR", "name": "Portuguese (Brazil)"},
    {"code": "ja-JP", "name": "Japanese"},
    {"code": "ko-KR", "name": "Korean"},
    {"code": "zh-CN", "name": "Chinese (Simplified)"},
    {"code": "hi-IN", "name": "Hindi"},
    {"code": "ar-SA", "name": "Arabic"},
    {"code": "ru-RU", "name": "Russian"},
    {"code": "nl-NL", "name": "Dutch"},
    {"code": "sv-SE", "name": "Swedish"},
]

WEB_SPEECH_FEATURES = {
    "continuous": True,
    "interimResults": True,
    "maxAlternatives": 1,
}

AVAILABLE_MODELS = {
    "deepgram": [
        {"id": "nova-2", "name": "Nova 2 (Latest)", "description": "Most accurate model"},
        {"id": "nova", "name": "Nova", "description": "High accuracy model"},
        {"id": "enhanced", "name": "Enhanced", "description": "Enhanced accuracy model"},
        {"id": "base", "name": "Base", "description": "Standard accuracy model"},
    ],
    "assemblyai": [
        {"id": "default", "name": "Default", "description": "Standard accuracy model"},
        {"id": "enhanced", "name": "Enhanced", "description": "Enhanced accuracy model"},
    ],
    "webSpeech": [
        {
            "id": "default",
            "name": "Web Speech API",
            "description": "Browser-based recognition",
        },
    ],
}

SUPPORTED_LANGUAGES = {
    "deepgram": [
        "en-US", "en-GB", "en-AU", "en-NZ", "en-IN", "es-ES", "es-419",
        "fr-FR", "de-DE", "it-IT", "pt-BR", "pt-PT", "ja-JP", "ko-KR",
        "zh-CN", "hi-IN", "ar-SA", "ru-RU", "nl-NL", "sv-SE",
    ],
    "assemblyai": [
        "en", "es", "fr", "de", "it", "pt", "ja", "ko", "zh", "hi", "ar",
        "ru", "nl", "sv",
    ],
    "webSpeech": [
        "en-US", "en-GB", "es-ES", "fr-FR", "de-DE", "it-IT", "pt-BR",
        "ja-JP", "ko-KR", "zh-CN",
    ],
}


def web_speech_config() -> dict:
    """Returns the configuration a browser needs for the Web Speech API."""
    return {"languages": WEB_SPEECH_LANGUAGES, "features": WEB_SPEECH_FEATURES}

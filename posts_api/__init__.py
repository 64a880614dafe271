from posts_api.settings import Settings

settings = Settings()

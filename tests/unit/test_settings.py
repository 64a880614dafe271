from posts_api.settings import Settings


class TestSettings:
    def test_successfully_build_posts_table_name(self):
        assert Settings(stage="prod").posts_table_name == "prod-posts"

    def test_successfully_cover_every_store_attempt_in_call_timeout(self):
        settings = Settings(store_timeout_in_seconds=2.5, store_max_attempts=3)

        assert settings.store_call_timeout_in_seconds == 7.5
        assert (
            settings.store_call_timeout_in_seconds
            >= settings.store_timeout_in_seconds * settings.store_max_attempts
        )

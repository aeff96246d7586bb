# mockapi/config.py
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    host: str = "127.0.0.1"
    port: int = 3001
    # login accepts this password for every registered email
    fixture_password: str = "TestPassword123!"
    session_token: str = "mock-jwt-token"
    # every presented credential resolves to this cart
    shared_session: str = "mock-user"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.getenv("MOCK_API_HOST", cls.host),
            port=int(os.getenv("MOCK_API_PORT", cls.port)),
            fixture_password=os.getenv("MOCK_API_FIXTURE_PASSWORD", cls.fixture_password),
            session_token=os.getenv("MOCK_API_SESSION_TOKEN", cls.session_token),
            shared_session=os.getenv("MOCK_API_SHARED_SESSION", cls.shared_session),
            log_level=os.getenv("MOCK_API_LOG_LEVEL", cls.log_level).upper(),
        )

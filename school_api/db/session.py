from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker


class Database:
    """
    커넥션 풀을 소유하는 DB 클라이언트.
    애플리케이션 시작 시 한 번 생성하고 종료 시 dispose 합니다.
    """

    def __init__(self, url: str, pool_size: int = 10, pool_timeout: int = 30, echo: bool = False):
        self.url = make_url(url)
        engine_kwargs = {"echo": echo, "pool_pre_ping": True}
        if self.backend == "sqlite":
            # 요청마다 threadpool의 다른 스레드에서 세션을 사용
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs["pool_size"] = pool_size
            engine_kwargs["pool_timeout"] = pool_timeout
        self.engine = create_engine(self.url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @property
    def backend(self) -> str:
        return self.url.get_backend_name()

    def dispose(self):
        self.engine.dispose()

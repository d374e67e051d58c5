"""
설정 관리 모듈.

pydantic-settings를 사용하여 .env 파일과 환경변수에서 설정을 로드한다.
검사 함수 자체는 설정을 읽지 않으며, scripts/에서 경로를 조립할 때 사용한다.

사용 예:
    settings = Settings()
    print(settings.controller_path)
"""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    검사 실행 설정.

    .env 파일 또는 환경변수에서 값을 읽어온다.
    필드명을 대문자로 변환한 환경변수와 매칭된다.
    예: project_root → PROJECT_ROOT
    """

    # 검사 대상 과제 프로젝트의 루트 디렉토리
    project_root: Path = Path(".")

    # 소스/뷰 파일 디코딩 인코딩
    source_encoding: str = "utf-8"

    # project_root 기준 상대 경로
    controller_source: Path = Path("src/main/java/com/yaksha/assignment/controller/GreetingController.java")
    index_view: Path = Path("src/main/webapp/index.jsp")
    greeting_view: Path = Path("src/main/webapp/WEB-INF/views/greeting.jsp")

    # pydantic-settings 설정: .env 파일 경로와 인코딩
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def controller_path(self) -> Path:
        return self.project_root / self.controller_source

    @property
    def index_view_path(self) -> Path:
        return self.project_root / self.index_view

    @property
    def greeting_view_path(self) -> Path:
        return self.project_root / self.greeting_view

"""
애플리케이션 설정 상수
"""

# 애플리케이션 정보
APP_NAME = "MVVMSample"
ORGANIZATION_NAME = "MVVMSample"
WINDOW_TITLE = "MVVM 샘플"

# ViewModel 현재 값의 초기값
INITIAL_VALUE = "0"

# 버튼 탭 시 생성할 난수 범위 (양 끝 포함)
RANDOM_MIN = 1
RANDOM_MAX = 100

# 로그 파일명 패턴 ({date}는 YYYYMMDD로 치환)
LOG_FILENAME_PATTERN = "mvvm_sample_{date}.log"
LOGGER_NAME = "MVVMSample"

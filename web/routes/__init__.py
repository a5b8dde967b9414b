"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- balances: Balance General 저장/조회
- export: Balance General HTML 내보내기
- clients: 고객 등록/목록
- financial_data: 경제 지표 (UF/UTM/Dólar)
- worksheet: 편집 화면 재계산
"""

"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- categories: 카테고리 CRUD
- transactions: 거래 CRUD + 월간 요약
- goals: 저축 목표 CRUD + 진행 상황
"""

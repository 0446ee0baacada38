"""전문인력 점수 계산."""

from collections.abc import Mapping

from mindconnect_recommender.domain.center.models import StaffInfo


def calculate_specialty_score(staff_info: StaffInfo | Mapping[str, bool]) -> int:
    """인력 구성에 따른 전문인력 점수를 계산합니다.

    우선순위대로 하나의 등급만 적용됩니다.
    정신건강의학과 전문의 100, 간호사 또는 사회복지사 80,
    기타 전문인력 60, 정보 없음 40.

    Args:
        staff_info: 인력 구성 요약 (또는 같은 키를 가진 매핑)

    Returns:
        전문인력 점수

    Raises:
        TypeError: staff_info가 None이거나 지원하지 않는 형식인 경우
        ValidationError: 매핑에 알 수 없는 키나 bool이 아닌 값이 있는 경우
    """
    if isinstance(staff_info, Mapping):
        staff_info = StaffInfo.model_validate(staff_info)
    if not isinstance(staff_info, StaffInfo):
        raise TypeError("staff_info는 StaffInfo 객체여야 합니다")

    if staff_info.has_psychiatrist:
        return 100
    if staff_info.has_nurse or staff_info.has_social_worker:
        return 80
    if staff_info.has_others:
        return 60
    return 40

"""Tracking links for Korean parcel carriers."""

import re
from urllib.parse import urlencode

# (carrier pattern, tracking page, waybill query parameter)
_CARRIERS: list[tuple[re.Pattern[str], str, str]] = [
    (
        re.compile(r"^우체국"),
        "https://service.epost.go.kr/trace.RetrieveDomRigiTraceList.comm",
        "sid1",
    ),
    (
        re.compile(r"^(대한통운|CJ|CJ\s*GLS|편의점)", re.IGNORECASE),
        "https://www.doortodoor.co.kr/parcel/doortodoor.do",
        "invc_no",
    ),
    (
        re.compile(r"^KGB", re.IGNORECASE),
        "http://www.kgbls.co.kr/sub5/trace.asp",
        "f_slipno",
    ),
    (
        re.compile(r"^한진"),
        "https://www.hanjin.co.kr/kor/CMS/DeliveryMgr/WaybillResult.do",
        "wblnum",
    ),
    (
        re.compile(r"^(KG\s*)?옐로우캡", re.IGNORECASE),
        "https://www.kgyellowcap.co.kr/delivery/waybill.html",
        "delivery",
    ),
    (
        re.compile(r"^(KG\s*)?동부", re.IGNORECASE),
        "https://www.dongbups.com/delivery/delivery_search_view.jsp",
        "item_no",
    ),
]

# Fixed query parameters some carriers require next to the waybill number.
_EXTRA_PARAMS: dict[str, dict[str, str]] = {
    "invc_no": {"fsp_action": "PARC_ACT_002", "fsp_cmd": "retrieveInvNoACT"},
    "wblnum": {"mCode": "MN038", "schLang": "KR"},
    "delivery": {"mode": "bill"},
}


def parcel(service: str | None, waybill: str | int | None) -> str | None:
    """Tracking URL for a waybill, or None for an unknown carrier.

    >>> parcel("CJ대한통운", 12345678)
    'https://www.doortodoor.co.kr/parcel/doortodoor.do?fsp_action=PARC_ACT_002&fsp_cmd=retrieveInvNoACT&invc_no=12345678'
    """
    if not service or waybill is None or waybill == "":
        return None

    name = service.strip()
    for pattern, url, param in _CARRIERS:
        if pattern.match(name):
            params = {**_EXTRA_PARAMS.get(param, {}), param: str(waybill).strip()}
            return f"{url}?{urlencode(params)}"
    return None

"""Tests for the view helpers: status, formatting, parcel, holidays, SMS, footer."""

import hashlib
import logging
from datetime import date

import pytest

from opencloset.core.config import settings
from opencloset.helpers import HELPERS
from opencloset.main import app
from opencloset.services.footer import ORGANIZATION, render_footer
from opencloset.services.formatting import age, avatar_url, code2decimal, commify
from opencloset.services.holiday_service import get_holidays
from opencloset.services.parcel import parcel
from opencloset.services.sms_service import SMSService
from opencloset.services.status import get_status


class TestGetStatus:
    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            (6, "수선"),
            ("6", "수선"),
            ("19", "결제대기"),
            ("수선", 6),
            ("탈의01", 20),
            ("결제대기", 19),
            ("repair", 6),
            ("fitting room1", 20),
            ("PAYMENT_DONE", 50),
        ],
    )
    def test_lookup(self, query, expected):
        assert get_status(query) == expected

    @pytest.mark.parametrize("query", [None, "", "999", "0", "없는상태"])
    def test_unknown(self, query):
        assert get_status(query) is None


class TestCommify:
    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            (0, "0"),
            (999, "999"),
            (1000, "1,000"),
            (1234567, "1,234,567"),
            (-30000, "-30,000"),
            (1234.5, "1,234.5"),
            ("10000", "10,000"),
            ("1,000", "1,000"),
            (None, ""),
        ],
    )
    def test_commify(self, number, expected):
        assert commify(number) == expected

    def test_non_number_is_returned_as_is(self) -> None:
        assert commify("n/a") == "n/a"


class TestAge:
    def test_age(self) -> None:
        assert age(1990, today=date(2026, 10, 19)) == 36
        assert age("2000", today=date(2026, 1, 1)) == 26

    @pytest.mark.parametrize("birth", [None, 0, "", "unknown"])
    def test_missing_birth(self, birth):
        assert age(birth) is None


class TestCode2Decimal:
    def test_clothes_code(self) -> None:
        assert code2decimal("0J001") == 19 * 36**3 + 1
        assert code2decimal("0J001") == 886465

    def test_lowercase_and_whitespace(self) -> None:
        assert code2decimal(" 0j001 ") == 886465

    @pytest.mark.parametrize("code", [None, "", "0J-01"])
    def test_invalid(self, code):
        assert code2decimal(code) is None


class TestAvatarUrl:
    def test_hash_of_normalized_email(self) -> None:
        digest = hashlib.md5(b"someone@example.com").hexdigest()
        assert avatar_url(" Someone@Example.com ") == f"{settings.GRAVATAR_URL}/{digest}"

    def test_size_and_default(self) -> None:
        url = avatar_url("someone@example.com", size=80, default="identicon")
        assert url.endswith("?s=80&d=identicon")


class TestParcel:
    def test_cj(self) -> None:
        assert parcel("CJ대한통운", 12345678) == (
            "https://www.doortodoor.co.kr/parcel/doortodoor.do"
            "?fsp_action=PARC_ACT_002&fsp_cmd=retrieveInvNoACT&invc_no=12345678"
        )

    @pytest.mark.parametrize(
        ("service", "expected"),
        [
            ("우체국택배", "https://service.epost.go.kr/trace.RetrieveDomRigiTraceList.comm?sid1=123"),
            ("편의점택배", "https://www.doortodoor.co.kr/parcel/doortodoor.do?fsp_action=PARC_ACT_002&fsp_cmd=retrieveInvNoACT&invc_no=123"),
            ("KGB택배", "http://www.kgbls.co.kr/sub5/trace.asp?f_slipno=123"),
            ("한진택배", "https://www.hanjin.co.kr/kor/CMS/DeliveryMgr/WaybillResult.do?mCode=MN038&schLang=KR&wblnum=123"),
            ("KG옐로우캡", "https://www.kgyellowcap.co.kr/delivery/waybill.html?mode=bill&delivery=123"),
            ("동부택배", "https://www.dongbups.com/delivery/delivery_search_view.jsp?item_no=123"),
        ],
    )
    def test_carriers(self, service, expected):
        assert parcel(service, "123") == expected

    @pytest.mark.parametrize(
        ("service", "waybill"),
        [("DHL", "123"), ("", "123"), (None, "123"), ("CJ", ""), ("CJ", None)],
    )
    def test_unknown(self, service, waybill):
        assert parcel(service, waybill) is None


class TestHolidays:
    def test_public_holidays(self) -> None:
        days = get_holidays(2026, extra_path="")
        assert "2026-01-01" in days
        assert "2026-03-01" in days
        assert "2026-12-25" in days
        assert days == sorted(days)
        assert all(day.startswith("2026-") for day in days)

    def test_extra_days_from_ini(self, tmp_path):
        extra = tmp_path / "holidays.ini"
        extra.write_text(
            "[2026]\n0502 = foundation day\n1225 = already public\n\n[2025]\n0707 = other year\n",
            encoding="utf-8",
        )

        days = get_holidays("2026", extra_path=extra)

        assert "2026-05-02" in days
        assert days.count("2026-12-25") == 1
        assert "2025-07-07" not in days
        assert "2026-07-07" not in days

    def test_missing_ini_logs_warning(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            days = get_holidays(2026, extra_path=tmp_path / "missing.ini")
        assert "2026-01-01" in days
        assert "not found" in caplog.text

    @pytest.mark.parametrize("year", [None, "", 0])
    def test_empty_year(self, year):
        assert get_holidays(year) == []


class TestSMSService:
    def test_send(self, db_session):
        sms = SMSService(db_session).send("010-1234-5678", "대여 안내")
        assert sms is not None
        assert sms.to == "01012345678"
        assert sms.from_ == settings.SMS_FROM
        assert sms.text == "대여 안내"
        assert sms.status == "pending"

    def test_explicit_sender(self, db_session):
        sms = SMSService(db_session, default_sender="0200000000").send(
            "01012345678", "hi", sender="0311111111"
        )
        assert sms is not None
        assert sms.from_ == "0311111111"

    @pytest.mark.parametrize(("to", "text"), [("", "hi"), (None, "hi"), ("---", "hi"), ("01012345678", "")])
    def test_missing_recipient_or_text(self, db_session, to, text):
        assert SMSService(db_session).send(to, text) is None


class TestFooter:
    def test_render(self) -> None:
        footer = render_footer()
        assert footer.startswith("<footer")
        assert ORGANIZATION["business_number"] in footer
        assert ORGANIZATION["email"] in footer
        assert "$" not in footer


class TestRegistration:
    def test_helpers_on_app_state(self) -> None:
        assert set(app.state.helpers) == set(HELPERS)
        assert app.state.helpers["commify"](30000) == "30,000"
        assert app.state.helpers["get_status"]("수선") == 6

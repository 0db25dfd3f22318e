"""Shared page footer."""

from string import Template

ORGANIZATION = {
    "name": "열린옷장",
    "representative": "한만일",
    "privacy_officer": "김소령",
    "business_number": "498-82-00028",
    "sharing_group": "서울특별시 공유단체 제26호",
    "mail_order_number": "2016-서울광진-0004",
    "email": "info@theopencloset.net",
    "phone": "070-4325-7521",
    "homepage": "https://theopencloset.net/",
}

_FOOTER_TEMPLATE = Template("""\
<footer class="page-footer">
  <div class="container">
    <div class="row">
      <div class="col-md-5">
        <h5>$name</h5>
        <p>
          사단법인 $name | 이사장 $representative
          <br>
          개인정보관리책임자 $privacy_officer
          <br>
          사업자등록번호 $business_number
          <br>
          $sharing_group
          <br>
          통신판매업신고번호 $mail_order_number
          <br>
          전자우편 $email
          <br>
          전화 $phone
          <br>
          <a href="https://www.theopencloset.net/terms" target="_blank">이용약관</a>
          <a href="https://www.theopencloset.net/privacy" target="_blank">개인정보취급방침</a>
        </p>
      </div>
      <div class="col-md-4">
        <h5>링크</h5>
        <ul class="list-inline">
          <li><a href="$homepage">홈페이지</a></li>
          <li><a href="https://visit.theopencloset.net/">방문 예약</a></li>
          <li><a href="https://online.theopencloset.net/">온라인 예약</a></li>
        </ul>
      </div>
      <div class="col-md-3">
        <h5>Connect</h5>
        <ul class="list-inline">
          <li><a href="https://twitter.com/openclosetnet/"><i class="fa fa-2x fa-twitter-square"></i></a></li>
          <li><a href="https://www.facebook.com/TheOpenCloset/"><i class="fa fa-2x fa-facebook-square"></i></a></li>
          <li><a href="https://www.instagram.com/opencloset_story/"><i class="fa fa-2x fa-instagram"></i></a></li>
          <li><a href="http://theopencloset.tistory.com/"><i class="fa fa-2x fa-rss-square"></i></a></li>
        </ul>
      </div>
    </div>
  </div>
  <div class="footer-copyright">
    <div class="container">
      &copy; 2015 THE OPEN CLOSET. All Rights Reserved.
    </div>
  </div>
</footer>
""")


def render_footer() -> str:
    """Render the footer HTML shown at the bottom of every page."""
    return _FOOTER_TEMPLATE.substitute(ORGANIZATION)

"""HTML page for the audit tool: link form plus the results view."""

from html import escape

from .audit import AuditState, Failed, Requesting
from .models import Report
from .scoring import score_band

TOTAL_STARS = 5

_STAR_PATH = (
    "M9.049 2.927c.3-.921 1.603-.921 1.902 0l1.07 3.292a1 1 0 00.95.69h3.462c.969 0 "
    "1.371 1.24.588 1.81l-2.8 2.034a1 1 0 00-.364 1.118l1.07 3.292c.3.921-.755 "
    "1.688-1.54 1.118l-2.8-2.034a1 1 0 00-1.175 0l-2.8 2.034c-.784.57-1.838-.197-1.539-1.118"
    "l1.07-3.292a1 1 0 00-.364-1.118L2.98 8.72c-.783-.57-.38-1.81.588-1.81h3.461a1 1 0 "
    "00.951-.69l1.07-3.292z"
)


def star_units(rating: float) -> list[bool]:
    """Filled state of each star: star i (1-based) is filled when i <= rating."""
    return [i <= rating for i in range(1, TOTAL_STARS + 1)]


def _format_rating(rating: float) -> str:
    """4.0 -> '4', 4.5 -> '4.5'."""
    return f"{rating:g}"


def _star_rating_html(rating: float) -> str:
    stars = ""
    for filled in star_units(rating):
        css = "star star-filled" if filled else "star star-empty"
        stars += (
            f'<svg class="{css}" fill="currentColor" viewBox="0 0 20 20">'
            f'<path d="{_STAR_PATH}"/></svg>'
        )
    return f'<div class="stars">{stars}</div>'


def _recommendations_html(report: Report) -> str:
    if not report.audit.recommendations:
        return """
        <div class="all-good">
            <h3>Excellent Work!</h3>
            <p>This profile is highly optimized.</p>
        </div>
        """

    items = ""
    for rec in report.audit.recommendations:
        items += f"""
            <li class="rec">
                <h4>{escape(rec.title)}</h4>
                <p>{escape(rec.text)}</p>
            </li>
        """
    return f'<ul class="recs">{items}</ul>'


def render_report(report: Report) -> str:
    """Results view: score summary, metric tiles and recommendations."""
    metrics = report.metrics
    band = score_band(report.audit.score)
    recent_post = metrics.has_recent_post

    return f"""
<div class="card report">
    <h2>Audit Report for {escape(metrics.business_name)}</h2>
    <p class="address">{escape(metrics.address)}</p>

    <div class="score-box">
        <p class="score-label">Overall Optimization Score:</p>
        <p class="score score-{band}">{report.audit.score}%</p>
    </div>

    <div class="tiles">
        <div class="tile">
            <h4>Average Rating</h4>
            <div class="rating-row">
                {_star_rating_html(metrics.rating)}
                <span class="tile-value">{_format_rating(metrics.rating)}</span>
            </div>
        </div>
        <div class="tile">
            <h4>Total Reviews</h4>
            <p class="tile-value">{metrics.review_count}</p>
        </div>
        <div class="tile">
            <h4>Uploaded Photos</h4>
            <p class="tile-value">{metrics.photo_count}</p>
        </div>
        <div class="tile">
            <h4>Recent Posts</h4>
            <p class="tile-value {'yes' if recent_post else 'no'}">{'Yes' if recent_post else 'No'}</p>
        </div>
    </div>

    <h3 class="recs-heading">Recommendations for Improvement:</h3>
    {_recommendations_html(report)}
</div>
"""


def render_page(state: AuditState) -> str:
    """Full page for the current session state."""
    loading = isinstance(state, Requesting)
    disabled = " disabled" if loading else ""
    button_label = "Analyzing..." if loading else "Generate Report"

    error_html = ""
    if isinstance(state, Failed):
        error_html = f'<p class="error-msg">{escape(state.message)}</p>'

    report_html = render_report(state.report) if state.report is not None else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Automated GBP Audit Tool</title>
<style>{PAGE_CSS}</style>
</head>
<body>
<div class="container">
  <header>
    <h1>Automated GBP Audit Tool</h1>
    <p class="subtitle">Enter a GMB share link to analyze the profile.</p>
  </header>

  <div class="card">
    <form id="form" action="/audit" method="get">
      <div class="input-row">
        <input type="url" id="link" name="link" value="{escape(state.link)}"
               placeholder="https://maps.app.goo.gl/..."{disabled}>
        <button type="submit" id="btn"{disabled}>{button_label}</button>
      </div>
    </form>
    {error_html}
  </div>

  {report_html}
</div>

<script>
const form = document.getElementById('form');
const btn = document.getElementById('btn');

form.addEventListener('submit', () => {{
  btn.disabled = true;
  btn.textContent = 'Analyzing...';
}});
</script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Inline CSS
# ---------------------------------------------------------------------------

PAGE_CSS = """
  *, *::before, *::after { margin: 0; padding: 0; box-sizing: border-box; }

  body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
    background: #f9fafb;
    color: #1f2937;
    min-height: 100vh;
    display: flex;
    align-items: center;
    justify-content: center;
    padding: 16px;
  }

  .container { width: 100%; max-width: 672px; margin: 0 auto; }

  header { text-align: center; margin-bottom: 32px; }
  h1 { font-size: 36px; font-weight: 700; color: #111827; }
  .subtitle { font-size: 18px; color: #4b5563; margin-top: 8px; }

  .card {
    background: white;
    padding: 32px;
    border-radius: 16px;
    box-shadow: 0 10px 15px rgba(0,0,0,0.1), 0 4px 6px rgba(0,0,0,0.05);
  }

  .input-row { display: flex; gap: 16px; }

  input[type="url"] {
    flex: 1;
    padding: 12px;
    border: 1px solid #d1d5db;
    border-radius: 8px;
    font-size: 15px;
    outline: none;
  }

  input[type="url"]:focus { border-color: #3b82f6; box-shadow: 0 0 0 2px rgba(59,130,246,0.4); }

  button {
    padding: 12px 32px;
    background: #2563eb;
    color: white;
    border: none;
    border-radius: 8px;
    font-size: 15px;
    font-weight: 700;
    cursor: pointer;
    white-space: nowrap;
  }

  button:hover { background: #1d4ed8; }
  button:disabled { background: #9ca3af; cursor: wait; }

  .error-msg { color: #ef4444; font-size: 14px; margin-top: 8px; }

  .report { margin-top: 32px; }
  .report h2 { font-size: 30px; font-weight: 700; color: #111827; text-align: center; margin-bottom: 8px; }
  .address { text-align: center; color: #4b5563; margin-bottom: 24px; }

  .score-box { text-align: center; margin-bottom: 32px; padding: 24px; background: #f3f4f6; border-radius: 8px; }
  .score-label { font-size: 18px; color: #4b5563; }
  .score { font-size: 60px; font-weight: 700; }
  .score-good { color: #16a34a; }
  .score-fair { color: #eab308; }
  .score-poor { color: #dc2626; }

  .tiles { display: grid; grid-template-columns: 1fr 1fr; gap: 24px; margin-bottom: 32px; }
  .tile { background: #f9fafb; padding: 16px; border-radius: 8px; }
  .tile h4 { font-weight: 600; color: #374151; }
  .tile-value { font-weight: 700; font-size: 18px; margin-top: 4px; }
  .tile-value.yes { color: #16a34a; }
  .tile-value.no { color: #ef4444; }

  .rating-row { display: flex; align-items: center; gap: 8px; margin-top: 4px; }
  .stars { display: flex; }
  .star { width: 20px; height: 20px; }
  .star-filled { color: #facc15; }
  .star-empty { color: #d1d5db; }

  .recs-heading { font-size: 24px; font-weight: 600; color: #1f2937; margin-bottom: 16px; padding-bottom: 8px; border-bottom: 1px solid #e5e7eb; }
  .recs { list-style: none; }
  .rec { background: #fefce8; padding: 16px; border-radius: 8px; margin-bottom: 16px; }
  .rec h4 { font-weight: 600; color: #854d0e; }
  .rec p { color: #a16207; }

  .all-good { text-align: center; padding: 24px; background: #f0fdf4; border-radius: 8px; }
  .all-good h3 { font-size: 20px; font-weight: 600; color: #166534; }
  .all-good p { color: #15803d; margin-top: 8px; }
"""

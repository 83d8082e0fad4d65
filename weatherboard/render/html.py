"""Static HTML page for the dashboard."""

from html import escape

from weatherboard.render.cards import CardView

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Weatherboard</title>
</head>
<body>
<p id="refreshStatus">{status}</p>
<div id="cards">
{cards}
</div>
<script>
async function press(city, target) {{
  const resp = await fetch('/api/cards/' + city + '/' + target, {{method: 'POST'}});
  const results = await resp.json();
  results.forEach(r => alert(r.message));
}}
async function pollStatus() {{
  const resp = await fetch('/api/status');
  const data = await resp.json();
  document.getElementById('refreshStatus').textContent = data.line;
}}
setInterval(pollStatus, 1000);
</script>
</body>
</html>
"""

CARD_TEMPLATE = """<div class="weather-card{extra_class}" data-city="{city}" onclick="press('{city}', 'weather')">
  <div class="weather-emoji">{emoji}</div>
  <div class="location-name">{title}</div>
  <div class="temp">{temperature} <span class="trend">{trend}</span></div>
  <div class="condition">{condition}</div>
  <div class="details"><span class="wind">{wind}</span><span class="humidity">{humidity}</span></div>
  <button class="forecast-btn" onclick="event.stopPropagation(); press('{city}', 'forecast')">5-day forecast</button>
</div>"""


def render_card_html(card: CardView) -> str:
    return CARD_TEMPLATE.format(
        extra_class="" if card.available else " unavailable",
        city=escape(card.city, quote=True),
        emoji=escape(card.emoji),
        title=escape(card.title),
        temperature=escape(card.temperature),
        trend=escape(card.trend_arrow),
        condition=escape(card.condition),
        wind=escape(card.wind),
        humidity=escape(card.humidity),
    )


def render_page(cards: list[CardView], status_line: str) -> str:
    return PAGE_TEMPLATE.format(
        status=escape(status_line),
        cards="\n".join(render_card_html(c) for c in cards),
    )

"""Single-page browser UI. All state comes from the session API."""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>YouTube SEO Content Generator</title>
<style>
  body { font-family: system-ui, sans-serif; background: #0f172a; color: #f1f5f9; margin: 0; }
  main { max-width: 56rem; margin: 0 auto; padding: 2rem 1rem; }
  .form { display: flex; gap: 1rem; margin: 2rem 0; }
  .form input { flex: 1; padding: 0.9rem 1.2rem; border-radius: 999px; border: 0; }
  .form button { padding: 0.9rem 2rem; border-radius: 999px; border: 0; background: #22c55e; color: #fff; font-weight: bold; }
  .card { background: #1e293b; padding: 1.25rem; border-radius: 0.5rem; margin-bottom: 1rem; position: relative; }
  .card h3 { margin-top: 0; color: #818cf8; }
  .copy { position: absolute; top: 1rem; right: 1rem; }
  .tag { display: inline-block; background: #334155; padding: 0.2rem 0.8rem; border-radius: 999px; margin: 0.2rem; }
  .titles li { display: flex; justify-content: space-between; gap: 1rem; margin-bottom: 0.5rem; }
  .grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(14rem, 1fr)); gap: 1rem; }
  .grid img { width: 100%; aspect-ratio: 16 / 9; object-fit: cover; border-radius: 0.4rem; }
  .error { background: #7f1d1d; padding: 1rem; border-radius: 0.5rem; text-align: center; }
  .status { text-align: center; }
  .score { display: flex; align-items: center; justify-content: space-between; gap: 1.5rem; }
</style>
</head>
<body>
<main>
  <h1>YouTube SEO Content Generator</h1>
  <p>Enter your video topic and let AI craft the perfect title, description, tags, and even generate unique thumbnail ideas to boost your channel's visibility.</p>
  <div class="form">
    <input id="topic" type="text" placeholder="e.g., 'How to bake a sourdough bread'">
    <button id="generate">Generate</button>
  </div>
  <div id="output"></div>
</main>
<script>
const topicInput = document.getElementById('topic');
const button = document.getElementById('generate');
const output = document.getElementById('output');
let sessionId = sessionStorage.getItem('sessionId');
let pollTimer = null;

function esc(text) {
  const div = document.createElement('div');
  div.textContent = text == null ? '' : String(text);
  return div.innerHTML;
}

function copyButton(key, copied) {
  const field = key.split(':')[0];
  const index = key.includes(':') ? Number(key.split(':')[1]) : null;
  return `<button class="copy-btn" data-field="${field}" data-index="${index}">${copied.includes(key) ? '&#10003; Copied' : 'Copy'}</button>`;
}

function gauge(score) {
  const c = score.size / 2;
  return `<svg width="${score.size}" height="${score.size}" style="transform: rotate(-90deg)">
    <circle r="${score.radius}" cx="${c}" cy="${c}" fill="transparent" stroke="#33415566" stroke-width="${score.stroke_width}"></circle>
    <circle r="${score.radius}" cx="${c}" cy="${c}" fill="transparent" stroke="${score.color}" stroke-width="${score.stroke_width}"
      stroke-dasharray="${score.circumference}" stroke-dashoffset="${score.dash_offset}" stroke-linecap="round"></circle>
  </svg><strong>${score.score}</strong>`;
}

function render(view) {
  const busy = view.state.kind === 'loading' || view.state.kind === 'interstitial';
  button.disabled = busy;
  topicInput.disabled = busy;
  button.textContent = view.state.kind === 'loading' ? 'Generating...' : 'Generate';

  if (view.state.kind === 'idle') {
    output.innerHTML = view.state.message ? `<p class="error">${esc(view.state.message)}</p>` : '';
    return;
  }
  if (view.state.kind === 'failed') {
    output.innerHTML = `<p class="error">${esc(view.state.message)}</p>`;
    return;
  }
  if (busy) {
    output.innerHTML = `<p class="status">${esc(view.state.message)}</p>`;
    return;
  }

  const r = view.result;
  const c = r.content;
  const notice = view.state.message ? `<p class="error">${esc(view.state.message)}</p>` : '';
  const titles = c.titles.map((t, i) => `<li><span>${esc(t)}</span>${copyButton('titles:' + i, view.copied)}</li>`).join('');
  const tags = c.tags.map(t => `<span class="tag">${esc(t)}</span>`).join('');
  const thumbs = r.thumbnails.map(t => `<div class="card"><img src="${t.url}" alt="Generated thumbnail ${t.index}">
      <a href="${t.url}" download="${esc(t.filename)}">Download</a></div>`).join('');
  output.innerHTML = `${notice}
    <div class="card score"><div><h3>Overall SEO Score</h3><p>${esc(c.scoreJustification)}</p></div><div>${gauge(r.score)}</div></div>
    <div class="card"><h3>Generated Title Options</h3><ul class="titles">${titles}</ul></div>
    <div class="card"><h3>Keyword Analysis</h3><div class="copy">${copyButton('keywordAnalysis', view.copied)}</div><p>${esc(c.keywordAnalysis)}</p></div>
    <div class="card"><h3>Generated Description</h3><div class="copy">${copyButton('description', view.copied)}</div><p style="white-space: pre-wrap">${esc(c.description)}</p></div>
    <div class="card"><h3>Generated Tags</h3><div class="copy">${copyButton('tags', view.copied)}</div>${tags}</div>
    <h3>AI-Generated Thumbnails</h3><div class="grid">${thumbs}</div>`;
}

async function refresh() {
  if (!sessionId) return;
  const resp = await fetch(`/content/sessions/${sessionId}`);
  if (!resp.ok) return;
  const view = await resp.json();
  render(view);
  const busy = view.state.kind === 'loading' || view.state.kind === 'interstitial';
  clearTimeout(pollTimer);
  if (busy) pollTimer = setTimeout(refresh, 500);
}

async function generate() {
  const resp = await fetch('/content/generate', {
    method: 'POST',
    headers: {'Content-Type': 'application/json'},
    body: JSON.stringify({topic: topicInput.value, session_id: sessionId}),
  });
  const body = await resp.json();
  const info = resp.ok ? body : (body.detail || {});
  if (info.session_id) {
    sessionId = info.session_id;
    sessionStorage.setItem('sessionId', sessionId);
  }
  if (resp.status === 400 && !info.session_id) {
    render({state: {kind: 'idle', message: info.detail}, copied: []});
    return;
  }
  refresh();
}

output.addEventListener('click', async (event) => {
  const btn = event.target.closest('.copy-btn');
  if (!btn) return;
  const payload = {field: btn.dataset.field};
  if (btn.dataset.index !== 'null') payload.index = Number(btn.dataset.index);
  const resp = await fetch(`/content/sessions/${sessionId}/copy`, {
    method: 'POST',
    headers: {'Content-Type': 'application/json'},
    body: JSON.stringify(payload),
  });
  if (!resp.ok) return;
  const body = await resp.json();
  await navigator.clipboard.writeText(body.text);
  refresh();
  setTimeout(refresh, 2100);
});

button.addEventListener('click', generate);
topicInput.addEventListener('keydown', (e) => { if (e.key === 'Enter') generate(); });
refresh();
</script>
</body>
</html>
"""

"""Minimal browser page driving the studio API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def studio_ui() -> HTMLResponse:
    """Serve the studio page."""
    return HTMLResponse(_STUDIO_UI_HTML)


_STUDIO_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Render Studio</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      select, textarea { width: 480px; padding: 0.4rem; }
      textarea { height: 6rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      img { max-width: 420px; margin-right: 1rem; border: 1px solid #ccc; }
      #gallery img { max-width: 140px; cursor: pointer; }
      #status { color: #555; }
    </style>
  </head>
  <body>
    <h1>Render Studio</h1>
    <div class="row"><input id="file" type="file" accept="image/*" /></div>
    <div class="row" id="options"></div>
    <div class="row"><textarea id="prompt"></textarea></div>
    <div class="row">
      <button onclick="suggest()">Suggest prompt</button>
      <button id="render" onclick="render()">Render</button>
      <span id="status">Ready.</span>
    </div>
    <div class="row" id="result"></div>
    <div class="row" id="style-lock"></div>
    <h2>Gallery</h2>
    <div class="row" id="gallery"></div>
    <script>
      let session = null;
      const base = () => '/sessions/' + session.id;

      async function call(method, path, body) {
        const res = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body === undefined ? undefined : JSON.stringify(body),
        });
        const data = await res.json();
        if (!res.ok) { throw new Error(data.detail || ('Error: ' + res.status)); }
        return data;
      }

      function show(state) {
        session = state;
        document.getElementById('prompt').value = state.prompt;
        for (const [axis, value] of Object.entries(state.selection)) {
          const select = document.getElementById('axis-' + axis);
          if (select) { select.value = value; }
        }
        const result = document.getElementById('result');
        result.innerHTML = '';
        const current = state.current;
        if (current) {
          result.innerHTML =
            '<img src="' + current.sketch_url + '" />' +
            '<img src="' + current.final_url + '" /><br />' +
            '<button onclick="save()">Save</button>' +
            '<button onclick="lock(\\'' + current.id + '\\')">' +
            (current.is_locked ? 'Unlock style' : 'Lock style') + '</button>' +
            '<a href="' + current.download_url + '">Download</a> ' +
            '<a href="' + current.download_url + '?kind=sketch">Download sketch</a>';
        }
        const styleLock = document.getElementById('style-lock');
        styleLock.innerHTML = '';
        if (state.style_lock) {
          styleLock.innerHTML =
            'Style locked: <img src="' + state.style_lock.final_url + '" style="max-width: 140px" />' +
            '<button onclick="unlock()">Unlock style</button>';
        }
        const gallery = document.getElementById('gallery');
        gallery.innerHTML = '';
        for (const item of state.gallery) {
          const img = document.createElement('img');
          img.src = item.final_url;
          img.title = item.id;
          img.onclick = () => select(item.id);
          img.oncontextmenu = (event) => { event.preventDefault(); remove(item.id); };
          gallery.appendChild(img);
        }
      }

      async function loadOptions() {
        const catalogs = await call('GET', '/options');
        const container = document.getElementById('options');
        for (const [axis, entries] of Object.entries(catalogs)) {
          const select = document.createElement('select');
          select.id = 'axis-' + axis;
          select.innerHTML = '<option value="">' + axis + '</option>' +
            entries.map(e => '<option value="' + e.fragment.replaceAll('"', '&quot;') + '">' + e.label + '</option>').join('');
          select.onchange = async () => show(await call('PATCH', base() + '/selection', { [axis]: select.value }));
          container.appendChild(select);
          container.appendChild(document.createElement('br'));
        }
      }

      document.getElementById('file').onchange = async (event) => {
        const file = event.target.files[0];
        if (!file) { return; }
        const reader = new FileReader();
        reader.onload = async () => {
          show(await call('PUT', base() + '/image', { data: reader.result, mime_type: file.type, name: file.name }));
        };
        reader.readAsDataURL(file);
      };

      document.getElementById('prompt').onchange = async (event) => {
        show(await call('PUT', base() + '/prompt', { prompt: event.target.value }));
      };

      async function guarded(label, action) {
        const status = document.getElementById('status');
        status.textContent = label;
        try { await action(); status.textContent = 'Ready.'; }
        catch (err) { status.textContent = err.message; }
      }

      async function suggest() {
        await guarded('Generating prompt...', async () => show(await call('POST', base() + '/prompt/suggest')));
      }

      async function render() {
        const button = document.getElementById('render');
        button.disabled = true;
        const poll = setInterval(async () => {
          const progress = await call('GET', base() + '/progress');
          if (progress.progress) { document.getElementById('status').textContent = progress.progress; }
        }, 1000);
        await guarded('Rendering...', async () => {
          await call('POST', base() + '/render');
          show(await call('GET', base()));
        });
        clearInterval(poll);
        button.disabled = false;
      }

      async function save() {
        await call('POST', base() + '/gallery/' + encodeURIComponent(session.current.id));
        show(await call('GET', base()));
      }

      async function lock(recordId) {
        await call('POST', base() + '/style-lock/' + encodeURIComponent(recordId));
        show(await call('GET', base()));
      }

      async function unlock() {
        show(await call('DELETE', base() + '/style-lock'));
      }

      async function select(recordId) {
        await call('POST', base() + '/gallery/' + encodeURIComponent(recordId) + '/select');
        show(await call('GET', base()));
      }

      async function remove(recordId) {
        await call('DELETE', base() + '/gallery/' + encodeURIComponent(recordId));
        const confirmed = window.confirm('Delete this image from the gallery?');
        await call('POST', base() + '/gallery/delete/' + (confirmed ? 'confirm' : 'cancel'));
        show(await call('GET', base()));
      }

      (async () => {
        await loadOptions();
        show(await call('POST', '/sessions'));
      })();
    </script>
  </body>
</html>
"""

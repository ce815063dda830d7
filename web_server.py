"""
Web server for the HSK 1 vocabulary browser
Read endpoint + browser page + CSV export in a single web service
"""
from flask import Flask, render_template_string, jsonify, request, Response
from flask_cors import CORS
import asyncio
import logging
import nest_asyncio

# Allow nested event loops (needed for Flask + asyncpg)
nest_asyncio.apply()

from hsk.audio import get_pronunciation
from hsk.config import (
    VOCABULARY_SOURCE, VOCABULARY_API_URL, REQUEST_TIMEOUT, STATIC_LOAD_DELAY, DATABASE_URL, PORT,
)
from hsk.controller import LoadStatus, ViewController
from hsk.data.vocabulary import get_word_count
from hsk.database import fetch_vocabulary, close_pool
from hsk.source import create_source

# Setup logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)

# 1 hour on the CDN, revalidate in the background for 5 minutes
VOCABULARY_CACHE_CONTROL = "s-maxage=3600, stale-while-revalidate=300"


def make_source():
    """Vocabulary source for the browser page, picked by VOCABULARY_SOURCE."""
    return create_source(
        VOCABULARY_SOURCE,
        api_url=VOCABULARY_API_URL,
        timeout=REQUEST_TIMEOUT,
        delay=STATIC_LOAD_DELAY,
        dsn=DATABASE_URL,
    )


def load_view(query: str) -> ViewController:
    """Load the vocabulary and apply the search query."""
    controller = ViewController(make_source())

    async def _load():
        try:
            await controller.load()
        finally:
            await close_pool()

    asyncio.run(_load())
    controller.set_query(query)
    return controller


HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>HSK 1 Vocabulary</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            background: #f1f5f9;
            color: #1e293b;
        }

        .container {
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
        }

        .header {
            text-align: center;
            padding: 20px;
            margin-bottom: 20px;
        }

        .header h1 {
            font-size: 2.4em;
            margin-bottom: 10px;
        }

        .header h1 span {
            color: #0ea5e9;
        }

        .toolbar {
            display: flex;
            gap: 10px;
            max-width: 700px;
            margin: 0 auto 25px auto;
        }

        .toolbar input {
            flex: 1;
            padding: 12px 15px;
            border: 1px solid #cbd5e1;
            border-radius: 10px;
            font-size: 1em;
        }

        .button {
            background: #ffffff;
            color: #475569;
            border: 1px solid #cbd5e1;
            padding: 12px 15px;
            border-radius: 10px;
            font-size: 1em;
            cursor: pointer;
            text-decoration: none;
        }

        .grid {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(240px, 1fr));
            gap: 20px;
        }

        .word-item {
            background: #ffffff;
            padding: 20px;
            border-radius: 15px;
            text-align: center;
            box-shadow: 0 1px 3px rgba(0, 0, 0, 0.08);
        }

        .word-item h4 {
            font-size: 2.6em;
            margin-bottom: 5px;
        }

        .word-item .pinyin {
            color: #0ea5e9;
            font-size: 1.2em;
        }

        .word-item .word-class {
            color: #94a3b8;
            font-size: 0.85em;
            font-style: italic;
        }

        .word-item .translation {
            margin-top: 10px;
            white-space: pre-line;
        }

        .notice, .empty {
            text-align: center;
            padding: 40px;
            background: #ffffff;
            border-radius: 15px;
            color: #64748b;
        }

        .notice {
            padding: 15px;
            margin-bottom: 20px;
        }

        .error {
            background: #fef2f2;
            color: #ef4444;
            padding: 30px;
            border-radius: 10px;
            text-align: center;
            font-size: 1.2em;
        }

        footer {
            text-align: center;
            margin-top: 50px;
            padding: 20px;
            color: #64748b;
            font-size: 0.9em;
        }
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1><span>HSK 1</span> Vocabulary</h1>
            <p>Browse, search, and master the essential words for the HSK Level 1 exam.</p>
        </div>

        <form class="toolbar" method="get" action="/">
            <input type="search" name="q" value="{{ query }}" placeholder="Search by character, pinyin or translation..." autofocus>
            <button class="button" type="submit">Search</button>
            <a class="button" href="/export?q={{ query | urlencode }}" aria-label="Export filtered data to CSV">Export CSV</a>
        </form>

        {% if notice %}
        <div class="notice">{{ notice }}</div>
        {% endif %}

        {% if status == "failed" %}
        <div class="error"><strong>Error:</strong> {{ error }}</div>
        {% elif words %}
        <div class="grid">
            {% for word in words %}
            <div class="word-item">
                <h4>{{ word.character }}</h4>
                <p class="pinyin">{{ word.pinyin }}</p>
                {% if word.word_class %}<p class="word-class">{{ word.word_class }}</p>{% endif %}
                <p class="translation">{{ word.translation }}</p>
                <button class="button" onclick="playAudio('{{ word.character | urlencode }}')">🔊</button>
            </div>
            {% endfor %}
        </div>
        {% else %}
        <div class="empty">
            <p>No vocabulary found for "{{ query }}".</p>
            <p>Try a different search term.</p>
        </div>
        {% endif %}

        <footer>HSK1 Vocabulary Viewer | Happy Studying!</footer>
    </div>
    <audio id="word-audio"></audio>
    <script>
        function playAudio(text) {
            const audio = document.getElementById('word-audio');
            audio.src = '/api/audio/' + text;
            audio.play();
        }
    </script>
</body>
</html>
"""


def render_page(controller: ViewController, notice: str = None):
    return render_template_string(
        HTML_TEMPLATE,
        query=controller.query,
        words=controller.filtered,
        status=controller.status.value,
        error=controller.error,
        notice=notice,
    )


@app.route('/')
def index():
    controller = load_view(request.args.get('q', ''))
    return render_page(controller)


@app.route('/export')
def export_csv():
    """Download the currently filtered words as CSV."""
    controller = load_view(request.args.get('q', ''))
    if controller.status == LoadStatus.FAILED:
        return render_page(controller)

    result = controller.export_current_view()
    if not result.ok:
        return render_page(controller, notice=result.notice)

    csv_file = result.download
    return Response(
        csv_file.content,
        content_type=csv_file.mimetype,
        headers={'Content-Disposition': f'attachment; filename="{csv_file.filename}"'}
    )


@app.route('/api/vocabulary')
def api_vocabulary():
    """Read endpoint: the whole hsk1_vocabulary table, ordered by id."""
    async def _read():
        try:
            return await fetch_vocabulary()
        finally:
            await close_pool()

    try:
        rows = asyncio.run(_read())
    except Exception as e:
        logger.error(f"Database Error: {e}", exc_info=True)
        return jsonify({'error': f'Failed to fetch vocabulary from the database: {e}'}), 500

    response = jsonify(rows)
    response.headers['Cache-Control'] = VOCABULARY_CACHE_CONTROL
    return response


@app.route('/api/audio/<text>')
def api_audio(text):
    """Return Mandarin pronunciation for the given text."""
    try:
        audio = get_pronunciation(text)
    except Exception as e:
        logger.error(f"Audio generation failed for {text!r}: {e}")
        return jsonify({'error': f'Failed to generate audio: {str(e)}'}), 500

    return Response(
        audio,
        mimetype='audio/mpeg',
        headers={'Content-Disposition': 'inline'}
    )


@app.route('/health')
def health():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'vocabulary_source': VOCABULARY_SOURCE,
        'database_url_set': bool(DATABASE_URL),
        'bundled_words': get_word_count(),
    })


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=PORT, debug=True)

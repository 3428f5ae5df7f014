from flask import Flask, render_template, request, jsonify
import logging
import os
import requests

app = Flask(__name__, template_folder='templates')

BACKEND_URL = os.getenv('BACKEND_URL', 'http://127.0.0.1:5050')
API_KEY = os.getenv('PHISHSCORE_API_KEY')

logger = logging.getLogger('frontend')

EXAMPLE_URLS = [
    'http://example.com',
    'http://192.168.1.1/login',
    'http://a.b.c.d.example.com/verify-account',
    'http://user@192.168.1.1/secure/login?account=verify&session=0123456789abcdef',
]


@app.route('/', methods=['GET'])
def index():
    return render_template('index.html', examples=EXAMPLE_URLS, initial_url=EXAMPLE_URLS[1])


@app.route('/submit', methods=['POST'])
def submit():
    data = request.form or request.get_json(silent=True) or {}
    if not isinstance(data, dict) or not isinstance(data.get('url'), str):
        return jsonify({'error': 'missing url'}), 400
    url = data['url'].strip()
    if not url:
        return jsonify({'error': 'missing url'}), 400

    headers = {'X-API-Key': API_KEY} if API_KEY else {}
    try:
        r = requests.post(f'{BACKEND_URL}/analyze', json={'url': url}, headers=headers, timeout=15)
        r.raise_for_status()
        analysis = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning('backend analyze failed: %s', e)
        return jsonify({'error': f'backend analyze failed: {e}'}), 502

    return jsonify(analysis)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    port = int(os.getenv('PORT', '8080'))
    app.run(host='0.0.0.0', port=port)

"""Flask API for the waiver recommendation service."""
import traceback
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, HTTPException

from waiver_edge.models.analysis import AnalysisWeights
from waiver_edge.services.data_cleaner import DataCleaner
from waiver_edge.services.data_loader import DataLoader
from waiver_edge.services.demo_data import get_demo_league
from waiver_edge.services.league_validation import validate_league_config
from waiver_edge.services.recommendation_engine import RecommendationEngine
from waiver_edge.services.roster_analyzer import RosterAnalyzer
from waiver_edge.services.scoring_config import STRATEGY_PRESETS, describe_strategy

app = Flask(__name__)
CORS(app)


# Global error handlers to ensure all errors return JSON
@app.errorhandler(400)
def bad_request(error):
    return jsonify({
        'success': False,
        'error': 'Bad request',
        'message': getattr(error, 'description', None) or 'The request body could not be processed'
    }), 400


@app.errorhandler(404)
def not_found(error):
    return jsonify({
        'success': False,
        'error': 'Not found',
        'message': 'The requested resource was not found'
    }), 404


@app.errorhandler(500)
def internal_error(error):
    return jsonify({
        'success': False,
        'error': 'Internal server error',
        'message': str(error) if error else 'An internal error occurred',
        'traceback': traceback.format_exc() if app.debug else None
    }), 500


@app.errorhandler(Exception)
def handle_exception(e):
    if isinstance(e, HTTPException):
        return jsonify({
            'success': False,
            'error': e.name,
            'message': e.description
        }), e.code
    print(f"Error handling {request.path}: {type(e).__name__}: {e}")
    return jsonify({
        'success': False,
        'error': type(e).__name__,
        'message': str(e),
        'traceback': traceback.format_exc() if app.debug else None
    }), 500


# Initialize services
data_loader = DataLoader()
data_cleaner = DataCleaner()
roster_analyzer = RosterAnalyzer()
recommendation_engine = RecommendationEngine(roster_analyzer)


def _get_json_body() -> dict:
    """Parsed JSON object body; empty dict when there is no body."""
    body = request.get_json(silent=True)
    if body is None:
        if request.get_data():
            raise BadRequest('Request body must be valid JSON')
        return {}
    if not isinstance(body, dict):
        raise BadRequest('Request body must be a JSON object')
    return body


def _get_player_records(body: dict, key: str) -> list:
    records = body.get(key)
    if records is None:
        return []
    if not isinstance(records, list):
        raise BadRequest(f"'{key}' must be a list of players")
    return records


@app.route('/api/health', methods=['GET'])
def health():
    return jsonify({'success': True, 'status': 'ok'})


@app.route('/api/strategies', methods=['GET'])
def strategies():
    """List strategy presets and describe the weights passed as query args."""
    weights = AnalysisWeights.from_dict({
        'roster_balance': request.args.get('roster_balance', 50),
        'risk': request.args.get('risk', 50),
    })
    return jsonify({
        'success': True,
        'presets': STRATEGY_PRESETS,
        'weights': weights.to_dict(),
        'description': describe_strategy(weights.roster_balance, weights.risk),
    })


@app.route('/api/roster/analyze', methods=['POST'])
def analyze_roster():
    """Per-position analysis and needs for a roster."""
    body = _get_json_body()
    roster = data_loader.players_from_payload(_get_player_records(body, 'roster'))
    cleaned = data_cleaner.clean_and_validate_players(roster)
    roster = cleaned['cleaned_players']

    return jsonify({
        'success': True,
        'roster_analysis': [a.to_dict() for a in roster_analyzer.analyze_roster(roster)],
        'needs': roster_analyzer.get_position_needs(roster),
        'counts': roster_analyzer.get_position_counts(roster),
        'issues': cleaned['issues'],
    })


@app.route('/api/analyze', methods=['POST'])
def analyze():
    """
    Rank candidates for a roster.

    Body: {roster: [...], candidates: [...], weights: {roster_balance, risk}, use_demo: bool}
    Falls back to the demo league when no usable candidates are supplied.
    """
    body = _get_json_body()
    weights = body.get('weights')
    if weights is not None and not isinstance(weights, dict):
        raise BadRequest("'weights' must be an object")
    weights = AnalysisWeights.from_dict(weights)

    roster = data_loader.players_from_payload(_get_player_records(body, 'roster'))
    candidates = data_loader.players_from_payload(_get_player_records(body, 'candidates'))

    cleaned_roster = data_cleaner.clean_and_validate_players(roster)
    roster = cleaned_roster['cleaned_players']
    cleaned_candidates = data_cleaner.clean_and_validate_players(
        candidates, exclude_ids={p.player_id for p in roster}
    )
    candidates = cleaned_candidates['cleaned_players']
    issues = cleaned_roster['issues'] + cleaned_candidates['issues']

    source = 'request'
    if body.get('use_demo') or not candidates:
        print("WARNING: No usable candidates supplied - falling back to demo league data")
        demo = get_demo_league()
        roster = demo['my_roster']
        candidates = demo['available_players']
        source = 'demo'

    views = recommendation_engine.build_views(candidates, roster, weights)

    return jsonify({
        'success': True,
        'source': source,
        'weights': weights.to_dict(),
        'strategy': describe_strategy(weights.roster_balance, weights.risk),
        'waiver': [s.to_dict() for s in views['waiver']],
        'trade_targets': [s.to_dict() for s in views['trade_targets']],
        'my_roster': [s.to_dict() for s in views['my_roster']],
        'roster_analysis': [a.to_dict() for a in views['roster_analysis']],
        'needs': views['needs'],
        'issues': issues,
    })


@app.route('/api/league/validate', methods=['POST'])
def validate_league():
    """Validate a Sleeper or ESPN league setup."""
    body = _get_json_body()
    result = validate_league_config(
        body.get('platform', 'sleeper'),
        body.get('league_id', body.get('leagueId')),
        body.get('roster_id', body.get('rosterId')),
    )
    return jsonify({'success': result['is_valid'], **result}), (200 if result['is_valid'] else 422)

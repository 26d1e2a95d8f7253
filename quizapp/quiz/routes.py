from flask import Blueprint, current_app, jsonify, request

from quizapp.errors import ValidationError
from quizapp.forms import StartForm
from quizapp.scoring import score_answer
from quizapp.store import get_store
from quizapp.utils import as_int, parse_leading_int

quiz_bp = Blueprint('quiz', __name__, url_prefix='/api')


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ==================== START ====================
@quiz_bp.post('/start')
def start():
    form = StartForm.from_json(_json_body())
    if not form.validate():
        raise ValidationError()

    candidate_id = get_store().create_candidate(form.name.data, form.email.data)
    current_app.logger.info(f'Candidate {candidate_id} started')
    return jsonify({'candidateId': candidate_id})


# ==================== QUESTIONS ====================
@quiz_bp.get('/questions/<index>')
def question(index):
    q = get_store().get_question_by_position(parse_leading_int(index))
    if q is None:
        return jsonify({'done': True})
    return jsonify(q.to_public_dict())


# ==================== ANSWER ====================
@quiz_bp.post('/answer')
def answer():
    data = _json_body()
    candidate_id = as_int(data.get('candidateId'))
    question_id = as_int(data.get('questionId'))
    submitted = data.get('answer')

    store = get_store()
    correct = score_answer(store.get_correct_answer(question_id), submitted)
    store.record_answer(
        candidate_id,
        question_id,
        submitted if isinstance(submitted, str) else None,
        correct,
    )
    return jsonify({'correct': correct})


# ==================== RESULT ====================
@quiz_bp.get('/result/<candidate_id>')
def result(candidate_id):
    return jsonify(get_store().get_candidate_score(as_int(candidate_id)))

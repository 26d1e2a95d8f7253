import io

import pandas as pd
from flask import Blueprint, jsonify, send_file

from quizapp.decorators import admin_password_required
from quizapp.store import get_store

quiz_admin_bp = Blueprint('quiz_admin', __name__, url_prefix='/api/admin')

CSV_COLUMNS = ['name', 'email', 'start_time', 'score', 'total']


@quiz_admin_bp.get('/candidates')
@admin_password_required
def candidates():
    return jsonify(get_store().list_candidates_with_scores())


@quiz_admin_bp.get('/csv')
@admin_password_required
def export_csv():
    rows = get_store().list_candidates_with_scores()
    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    csv_bytes = df.to_csv(index=False, lineterminator='\n').encode('utf-8')

    return send_file(
        io.BytesIO(csv_bytes),
        mimetype='text/csv',
        as_attachment=True,
        download_name='candidates.csv',
    )

from flask import Blueprint, current_app, jsonify, request

from .errors import AuthenticationError, ConflictError, StorageError, UploadError, ValidationError
from .extensions import db
from .services import AccountService, ProductService
from .storage import Storage
from .uploads import get_upload_namer

api_bp = Blueprint('api', __name__)


def _storage():
    # create_app(storage=...) lets tests swap in a fake
    storage = current_app.extensions.get('catalog.storage')
    return Storage(db.session) if storage is None else storage


def _products():
    return ProductService(_storage())


def _accounts():
    return AccountService(_storage())


def _error(message, status):
    return jsonify({'error': str(message)}), status


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _product_fields() -> dict:
    # Multipart form first, plain JSON bodies are accepted too
    return request.form.to_dict() or _json_body()


@api_bp.errorhandler(UploadError)
def _upload_failed(e):
    return _error(e, 500)


# --- Products ----------------------------------------------------------------

@api_bp.route('/products', methods=['GET'])
def list_products():
    try:
        return jsonify(_products().list())
    except StorageError as e:
        return _error(e, 500)


@api_bp.route('/products', methods=['POST'])
def create_product():
    image = get_upload_namer().save(request.files.get('image'))
    try:
        product_id = _products().create(_product_fields(), image)
    except StorageError as e:
        return _error(e, 400)
    return jsonify({'message': '添加成功', 'id': product_id})


@api_bp.route('/products/<product_id>', methods=['PUT'])
def update_product(product_id):
    image = get_upload_namer().save(request.files.get('image'))
    try:
        _products().update(product_id, _product_fields(), image)
    except StorageError as e:
        return _error(e, 400)
    return jsonify({'message': '更新成功'})


@api_bp.route('/products/<product_id>', methods=['DELETE'])
def delete_product(product_id):
    try:
        _products().delete(product_id)
    except StorageError as e:
        return _error(e, 400)
    return jsonify({'message': '删除成功'})


# --- Accounts ----------------------------------------------------------------

@api_bp.route('/users', methods=['GET'])
def list_users():
    try:
        return jsonify(_accounts().list())
    except StorageError as e:
        return _error(e, 500)


@api_bp.route('/login', methods=['POST'])
def login():
    data = _json_body()
    try:
        user = _accounts().login(data.get('username'), data.get('password'))
    except AuthenticationError as e:
        return _error(e, 401)
    except StorageError as e:
        return _error(e, 500)
    return jsonify({'message': '登录成功', 'user': user})


@api_bp.route('/register', methods=['POST'])
def register():
    data = _json_body()
    try:
        user = _accounts().register(data.get('username'), data.get('password'))
    except ValidationError as e:
        return _error(e, 400)
    except ConflictError:
        return _error('该用户名已被注册', 400)
    except StorageError as e:
        return _error(e, 500)
    return jsonify({'message': '注册成功', 'user': user})


@api_bp.route('/change-password', methods=['POST'])
def change_password():
    data = _json_body()
    try:
        _accounts().change_password(data.get('username'), data.get('oldPassword'), data.get('newPassword'))
    except AuthenticationError as e:
        return _error(e, 401)
    except StorageError as e:
        return _error(e, 500)
    return jsonify({'message': '密码修改成功'})

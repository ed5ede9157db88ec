from .extensions import db


PRODUCT_FIELDS = ('brand', 'name', 'origin', 'type', 'tar', 'price', 'stock')


class Product(db.Model):
    __tablename__ = 'products'
    # Emit AUTOINCREMENT so ids of deleted rows are never handed out again
    __table_args__ = {'sqlite_autoincrement': True}
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    brand = db.Column(db.Text)
    name = db.Column(db.Text)
    origin = db.Column(db.Text)
    type = db.Column(db.Text)
    tar = db.Column(db.Text)
    price = db.Column(db.Text)
    stock = db.Column(db.Integer)
    # '' or '/uploads/<generated-name>'
    image = db.Column(db.Text)

    def to_dict(self):
        return {
            'id': self.id,
            'brand': self.brand,
            'name': self.name,
            'origin': self.origin,
            'type': self.type,
            'tar': self.tar,
            'price': self.price,
            'stock': self.stock,
            'image': self.image,
        }

    def __repr__(self):
        return f"<Product {self.id} {self.name}>"


class User(db.Model):
    __tablename__ = 'users'
    __table_args__ = {'sqlite_autoincrement': True}
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    username = db.Column(db.Text, unique=True)
    # Stored and compared verbatim. See DESIGN.md.
    password = db.Column(db.Text)
    role = db.Column(db.Text)  # 'admin' or 'user'

    def __repr__(self):
        return f"<User {self.id} {self.username} ({self.role})>"

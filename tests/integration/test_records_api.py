"""
Integration tests for the flat collection endpoints.
"""


class TestListRecords:
    """Test list, search and pagination."""

    def test_default_page_size(self, client):
        response = client.get('/api/products')
        data = response.get_json()

        assert response.status_code == 200
        assert len(data['items']) == 5
        assert data['count'] == 5
        assert data['page'] == 0
        assert data['per_page'] == 5

    def test_search(self, client):
        data = client.get('/api/customers?q=JANE').get_json()

        assert [c['name'] for c in data['items']] == ['Jane Smith']
        assert data['count'] == 1

    def test_page_past_the_end(self, client):
        data = client.get('/api/products?page=1').get_json()

        assert data['items'] == []
        assert data['count'] == 5

    def test_per_page_is_capped(self, client, app):
        app.config['MAX_PAGE_SIZE'] = 2
        data = client.get('/api/products?per_page=50').get_json()

        assert data['per_page'] == 2
        assert [p['id'] for p in data['items']] == [1, 2]

    def test_unknown_collection(self, client):
        response = client.get('/api/widgets')

        assert response.status_code == 404
        assert response.get_json()['status'] == 'error'


class TestRecordMutations:
    """Test create, update and delete."""

    def test_create(self, client):
        response = client.post('/api/stores', json={
            'name': 'Store 3', 'phone': '111-222-3333', 'email': 'store3@example.com', 'status': 'Disable'
        })

        assert response.status_code == 201
        assert response.get_json()['id'] == 4
        assert client.get('/api/stores/4').get_json()['name'] == 'Store 3'

    def test_create_missing_fields(self, client):
        response = client.post('/api/products', json={'name': 'Mouse'})
        data = response.get_json()

        assert response.status_code == 400
        assert data['message'] == 'Please fill in all required fields'
        assert data['fields'] == ['category', 'sku']

    def test_create_requires_json_object(self, client):
        response = client.post('/api/products', data='name=Mouse')

        assert response.status_code == 400

    def test_update(self, client):
        response = client.put('/api/products/2', json={'stock': 90, 'price': 649.5})
        data = response.get_json()

        assert response.status_code == 200
        assert data['stock'] == 90
        assert data['price'] == 649.5

    def test_update_unknown_field(self, client):
        response = client.put('/api/products/2', json={'colour': 'black'})

        assert response.status_code == 400
        assert response.get_json()['fields'] == ['colour']

    def test_update_missing_record(self, client):
        assert client.put('/api/products/42', json={'stock': 1}).status_code == 404

    def test_delete(self, client):
        response = client.delete('/api/quotations/1')

        assert response.status_code == 200
        assert client.get('/api/quotations/1').status_code == 404
        assert client.delete('/api/quotations/1').status_code == 404

    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.get_json()['backend'] == 'memory'


class TestSqlBackend:
    """Test the API on the SQLAlchemy record store."""

    def test_create_and_reload(self, tmp_path):
        from config import TestingConfig
        from inventory_dashboard import create_app

        class SqlConfig(TestingConfig):
            RECORD_STORE_BACKEND = 'sql'
            SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'db' / 'inventory.db'}"

        client = create_app(SqlConfig).test_client()
        response = client.post('/api/expenses', json={'date': '2024-03-16', 'category': 'Rent', 'amount': 1200})

        assert response.status_code == 201
        assert response.get_json()['id'] == 6
        assert client.get('/api/expenses?q=rent').get_json()['count'] == 1
        assert (tmp_path / 'db' / 'inventory.db').exists()


class TestNumberInput:
    """Test that bad numbers are rejected with 400 instead of being stored."""

    def test_non_finite_price(self, client):
        for value in ('Infinity', 'NaN'):
            response = client.post('/api/products', json={
                'name': 'Mouse', 'category': 'Accessories', 'sku': 'MS001', 'price': value
            })

            assert response.status_code == 400
            assert response.get_json()['fields'] == ['price']

        assert client.get('/api/products').get_json()['count'] == 5

    def test_non_finite_sales_return_total(self, client):
        response = client.post('/api/salesReturns', json={
            'productName': 'Apple', 'date': '2024-03-16', 'customer': 'Thomas', 'status': 'Pending',
            'grandTotal': 'NaN', 'paid': 0, 'due': 10, 'paymentStatus': 'Unpaid'
        })

        assert response.status_code == 400
        assert response.get_json()['fields'] == ['grandTotal']

    def test_text_price(self, client):
        response = client.post('/api/products', json={
            'name': 'Mouse', 'category': 'Accessories', 'sku': 'MS001', 'price': 'abc'
        })

        assert response.status_code == 400

    def test_negative_price_never_reaches_a_line_item(self, client):
        response = client.post('/api/products', json={
            'name': 'Mouse', 'category': 'Accessories', 'sku': 'MS001', 'price': -50
        })

        assert response.status_code == 400
        assert response.get_json()['message'] == 'Price cannot be negative'

        draft = client.post('/api/sales/draft/items', json={'productId': 6, 'quantity': 2}).get_json()
        assert draft['items'] == []
        assert draft['total'] == 0

    def test_negative_price_update(self, client):
        assert client.put('/api/products/1', json={'price': -1}).status_code == 400
        assert client.get('/api/products/1').get_json()['price'] == 999.99

import pytest

from src.platform.validation.validation_gate import to_violations


@pytest.mark.unit
class TestToViolations:
    def test_strips_request_source_and_uses_catalog(self):
        errors = [
            {'type': 'greater_than', 'loc': ('body', 'price'), 'msg': 'x', 'input': -10},
            {'type': 'missing', 'loc': ('body', 'name'), 'msg': 'x', 'input': {}},
            {'type': 'less_than_equal', 'loc': ('query', 'limit'), 'msg': 'x', 'input': '101'},
        ]

        assert to_violations(errors) == [
            {'field': 'price', 'message': 'Price must be a positive number', 'value': -10},
            {'field': 'name', 'message': 'Product name is required', 'value': None},
            {
                'field': 'limit',
                'message': 'limit must be less than or equal to 100',
                'value': '101',
            },
        ]

    def test_malformed_json_body(self):
        errors = [{'type': 'json_invalid', 'loc': ('body', 7), 'msg': 'x', 'input': {}}]

        [item] = to_violations(errors)

        assert item['field'] == '7'
        assert item['message'] == 'Request body must be valid JSON'

    def test_falls_back_to_pydantic_message(self):
        errors = [{'type': 'bool_parsing', 'loc': ('body', 'flag'), 'msg': 'Not a bool'}]

        assert to_violations(errors)[0]['message'] == 'Not a bool'

    def test_nested_field_uses_leaf_for_catalog(self):
        errors = [{'type': 'int_from_float', 'loc': ('body', 'items', 0, 'stock'), 'input': 1.5}]

        [item] = to_violations(errors)

        assert item['field'] == 'items.0.stock'
        assert item['message'] == 'Stock must be an integer'


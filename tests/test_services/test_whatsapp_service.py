"""
Unit tests for the WhatsApp checkout message and link
"""
from decimal import Decimal
from urllib.parse import urlsplit, parse_qs

from stylehub.services.whatsapp_service import build_whatsapp_message, build_whatsapp_url, format_amount


class TestFormatAmount:

    def test_whole_amount_has_no_decimals(self):
        assert format_amount(Decimal('1299.00'), currency='₹') == '₹1,299'

    def test_fractional_amount(self):
        assert format_amount(Decimal('1299.5'), currency='₹') == '₹1,299.50'

    def test_float_and_int(self):
        assert format_amount(599.0, currency='Rs ') == 'Rs 599'
        assert format_amount(125000, currency='') == '125,000'


class TestWhatsAppMessage:

    def test_message_lists_order_details(self, sample_order):
        message = build_whatsapp_message(sample_order, store_name='StyleHub')
        lines = message.split('\n')

        assert lines[0] == '🛍️ *New Order from StyleHub*'
        assert '📦 *Product:* Classic White T-Shirt' in lines
        assert '📊 *Quantity:* 2' in lines
        assert '📏 *Size:* M' in lines
        assert '🎨 *Color:* White' in lines
        assert '*Name:* Asha Rao' in lines
        assert '*Phone:* 9876543210' in lines
        assert '*Address:* 12 MG Road, Pune' in lines
        assert lines[-1] == '*Order ID:* 7'
        assert any(line.startswith('💵 *Total Amount:*') and line.endswith('1,198') for line in lines)

    def test_optional_lines_are_omitted(self, sample_order):
        order = sample_order.model_copy(update={'color': None, 'customer_address': None, 'notes': None})

        message = build_whatsapp_message(order, store_name='StyleHub')

        assert 'Color' not in message
        assert 'Address' not in message
        assert 'Special Instructions' not in message

    def test_notes_become_special_instructions(self, sample_order):
        order = sample_order.model_copy(update={'notes': 'Gift wrap please'})

        message = build_whatsapp_message(order, store_name='StyleHub')

        assert '📝 *Special Instructions:* Gift wrap please' in message


class TestWhatsAppUrl:

    def test_url_targets_number_and_carries_message(self, sample_order):
        url = build_whatsapp_url(sample_order, phone_number='919999999999')
        parts = urlsplit(url)

        assert parts.scheme == 'https'
        assert parts.netloc == 'wa.me'
        assert parts.path == '/919999999999'
        assert parse_qs(parts.query)['text'][0] == build_whatsapp_message(sample_order)

    def test_message_is_fully_encoded(self, sample_order):
        url = build_whatsapp_url(sample_order, phone_number='919999999999')
        query = url.split('?text=', 1)[1]

        assert ' ' not in query
        assert '\n' not in query
        assert '&' not in query
        assert '/' not in query

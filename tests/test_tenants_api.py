from __future__ import annotations

import unittest
from unittest.mock import patch

import pymysql

from app.modules.tenants.repository import ACCOUNT_FIELDS
from tests.support import CALL_PROCEDURE, ApiTestCase, ok_packet, procedure_calls, row_sets

SIGNUP = {
    'businessName': 'Asha Stores', 'phoneNumber': '9999999999', 'password': 'secret',
    'Address': 'MG Road', 'GSTIN': '29ABCDE1234F1Z5', 'BillMobile': '8888888888', 'BillFormat': 'A5',
}


def account(**overrides):
    body = {name: f'{name}-value' for name in ACCOUNT_FIELDS}
    body.update(overrides)
    return body


class SignupLoginTests(ApiTestCase, unittest.TestCase):
    @patch(CALL_PROCEDURE)
    def test_signup(self, mock_call) -> None:
        mock_call.return_value = ok_packet(insert_id=12)

        response = self.client.post('/signup', json=SIGNUP)

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {'success': True, 'message': 'Created successfully', 'loginId': 12})
        self.assertEqual(procedure_calls(mock_call), [('insertLogin', (
            'Asha Stores', '9999999999', 'secret', 'MG Road', '29ABCDE1234F1Z5', '8888888888', 'A5',
        ))])

    @patch(CALL_PROCEDURE)
    def test_signup_with_taken_phone(self, mock_call) -> None:
        mock_call.side_effect = pymysql.err.IntegrityError(1062, "Duplicate entry '9999999999'")

        response = self.client.post('/signup', json=SIGNUP)

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()['message'], 'Phone number already exists. Please try logging in.')
        self.assertEqual(self.session.events, ['rollback', 'close'])

    @patch(CALL_PROCEDURE)
    def test_signup_requires_credentials(self, mock_call) -> None:
        response = self.client.post('/signup', json={'businessName': 'Asha Stores'})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['missing'], ['password', 'phoneNumber'])
        mock_call.assert_not_called()

    @patch(CALL_PROCEDURE)
    def test_login_returns_the_tenant_row(self, mock_call) -> None:
        mock_call.return_value = row_sets([{'LoginID': 12, 'BusinessName': 'Asha Stores', 'EnablePoints': 1}])

        response = self.client.get('/login', params={'phoneNumber': '9999999999', 'password': 'secret'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'LoginID': 12, 'BusinessName': 'Asha Stores', 'EnablePoints': 1})
        self.assertEqual(procedure_calls(mock_call), [('checkLogin', ('9999999999', 'secret'))])

    @patch(CALL_PROCEDURE)
    def test_wrong_credentials(self, mock_call) -> None:
        mock_call.return_value = row_sets([])

        response = self.client.get('/login', params={'phoneNumber': '9999999999', 'password': 'nope'})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {'success': False, 'message': 'Invalid login credentials'})

    @patch(CALL_PROCEDURE)
    def test_login_requires_both_parameters(self, mock_call) -> None:
        response = self.client.get('/login', params={'phoneNumber': '9999999999'})

        self.assertEqual(response.status_code, 400)
        mock_call.assert_not_called()


class AccountAdministrationTests(ApiTestCase, unittest.TestCase):
    @patch(CALL_PROCEDURE)
    def test_admin_creates_account_with_flags_in_order(self, mock_call) -> None:
        mock_call.return_value = ok_packet()

        response = self.client.post('/AdminLogin', json=account())

        self.assertEqual(response.status_code, 201)
        name, params = procedure_calls(mock_call)[0]
        self.assertEqual(name, 'Admin')
        self.assertEqual(params, tuple(f'{field}-value' for field in ACCOUNT_FIELDS))
        self.assertEqual(len(params), 19)

    @patch(CALL_PROCEDURE)
    def test_admin_create_requires_bill_format(self, mock_call) -> None:
        response = self.client.post('/AdminLogin', json=account(BillFormat=None))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['missing'], ['BillFormat'])

    @patch(CALL_PROCEDURE)
    def test_update_user_with_taken_phone(self, mock_call) -> None:
        mock_call.side_effect = pymysql.err.IntegrityError(1062, "Duplicate entry '9999999999'")

        response = self.client.post('/updateUser', json=account(LoginID=12))

        self.assertEqual(response.status_code, 409)
        self.assertEqual(
            response.json()['message'],
            'Phone number already exists for another user. Please use a different number.'
        )

    @patch(CALL_PROCEDURE)
    def test_update_user_leads_with_login_id(self, mock_call) -> None:
        mock_call.return_value = ok_packet()

        response = self.client.post('/updateUser', json=account(LoginID=12))

        self.assertEqual(response.status_code, 200)
        name, params = procedure_calls(mock_call)[0]
        self.assertEqual(name, 'UpdateUsers')
        self.assertEqual(params[0], 12)
        self.assertEqual(len(params), 20)

    @patch(CALL_PROCEDURE)
    def test_delete_user(self, mock_call) -> None:
        mock_call.return_value = ok_packet()

        response = self.client.request('DELETE', '/DeleteUser', json={'LoginID': 12})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['message'], 'User with LoginID 12 deleted successfully')
        self.assertEqual(procedure_calls(mock_call), [('DeleteUser', (12,))])

    @patch(CALL_PROCEDURE)
    def test_list_accounts(self, mock_call) -> None:
        mock_call.return_value = row_sets([{'LoginID': 12}])

        response = self.client.get('/getUser')

        self.assertEqual(response.json()['data'], [{'LoginID': 12}])
        self.assertEqual(procedure_calls(mock_call), [('getUser', ())])


class ProfileTests(ApiTestCase, unittest.TestCase):
    @patch(CALL_PROCEDURE)
    def test_password_change(self, mock_call) -> None:
        mock_call.return_value = row_sets([{'status': 1, 'message': 'Password updated'}])

        response = self.client.post('/updatepassword', json={
            'LoginID': 12, 'OldPassword': 'secret', 'NewPassword': 'better-secret',
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(procedure_calls(mock_call), [('UpdatePassword', (12, 'secret', 'better-secret'))])
        self.assertEqual(self.session.events, ['commit', 'close'])

    @patch(CALL_PROCEDURE)
    def test_wrong_old_password_is_refused(self, mock_call) -> None:
        mock_call.return_value = row_sets([{'status': 0, 'message': 'Old password is incorrect'}])

        response = self.client.post('/updatepassword', json={
            'LoginID': 12, 'OldPassword': 'wrong', 'NewPassword': 'better-secret',
        })

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Old password is incorrect')
        self.assertEqual(self.session.events, ['rollback', 'close'])

    @patch(CALL_PROCEDURE)
    def test_update_firm(self, mock_call) -> None:
        mock_call.return_value = ok_packet()

        response = self.client.put('/updateFirm', json={
            'LoginID': 12, 'BusinessName': 'Asha Stores', 'Address': 'MG Road', 'GSTIN': None,
            'BillMobile': '8888888888', 'BillFormat': 'A5', 'UPI': 'asha@upi', 'StateCode': 29,
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(procedure_calls(mock_call), [('UpdateFirm', (
            12, 'Asha Stores', 'MG Road', None, '8888888888', 'A5', 'asha@upi', 29,
        ))])


if __name__ == '__main__':
    unittest.main()

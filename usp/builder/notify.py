"""Builders for Notify requests and NotifyResp responses."""

from ..errors import BuilderError
from ..msg import Body, Notify, NotifyResp
from .common import StrPairs, err_msg_or_default, request_body, response_body, to_str_map

OperationComplete = Notify.OperationComplete


class NotifyBuilder:
    """Assemble a Notify request; one notification kind must be chosen.

    Each ``with_*`` notification setter replaces any earlier choice.
    """

    def __init__(self, subscription_id: str) -> None:
        self.subscription_id = subscription_id
        self.send_resp = False
        self._notification: (
            Notify.Event
            | Notify.ValueChange
            | Notify.ObjectCreation
            | Notify.ObjectDeletion
            | Notify.OperationComplete
            | Notify.OnBoardRequest
            | None
        ) = None

    def with_send_resp(self, send_resp: bool) -> "NotifyBuilder":
        self.send_resp = send_resp
        return self

    def with_onboard_request(
        self, oui: str, product_class: str, serial_number: str, agent_supported_protocol_versions: str
    ) -> "NotifyBuilder":
        self._notification = Notify.OnBoardRequest(
            oui=oui,
            product_class=product_class,
            serial_number=serial_number,
            agent_supported_protocol_versions=agent_supported_protocol_versions,
        )
        return self

    def with_value_change(self, param_path: str, param_value: str) -> "NotifyBuilder":
        self._notification = Notify.ValueChange(param_path=param_path, param_value=param_value)
        return self

    def with_event(self, obj_path: str, event_name: str, params: StrPairs = ()) -> "NotifyBuilder":
        self._notification = Notify.Event(obj_path=obj_path, event_name=event_name, params=to_str_map(params))
        return self

    def with_object_creation(self, obj_path: str, unique_keys: StrPairs = ()) -> "NotifyBuilder":
        self._notification = Notify.ObjectCreation(obj_path=obj_path, unique_keys=to_str_map(unique_keys))
        return self

    def with_object_deletion(self, obj_path: str) -> "NotifyBuilder":
        self._notification = Notify.ObjectDeletion(obj_path=obj_path)
        return self

    def with_operation_complete_output_args(
        self, obj_path: str, command_name: str, command_key: str, output_args: StrPairs = ()
    ) -> "NotifyBuilder":
        self._notification = OperationComplete(
            obj_path=obj_path,
            command_name=command_name,
            command_key=command_key,
            operation_resp=OperationComplete.OutputArgs(output_args=to_str_map(output_args)),
        )
        return self

    def with_operation_complete_cmd_failure(
        self, obj_path: str, command_name: str, command_key: str, err_code: int, err_msg: str | None = None
    ) -> "NotifyBuilder":
        self._notification = OperationComplete(
            obj_path=obj_path,
            command_name=command_name,
            command_key=command_key,
            operation_resp=OperationComplete.CommandFailure(
                err_code=err_code, err_msg=err_msg_or_default(err_code, err_msg)
            ),
        )
        return self

    def build(self) -> Body:
        if self._notification is None:
            raise BuilderError("Must specify a notification type")
        return request_body(
            Notify(subscription_id=self.subscription_id, send_resp=self.send_resp, notification=self._notification)
        )


class NotifyRespBuilder:
    def __init__(self, subscription_id: str) -> None:
        self.subscription_id = subscription_id

    def build(self) -> Body:
        return response_body(NotifyResp(subscription_id=self.subscription_id))

"""Tests for the Msg, Record and operation builders."""

import pytest
from pydantic import ValidationError

from usp import (
    BuilderError,
    CmdType,
    MQTTVersion,
    MsgType,
    ObjAccessType,
    ParamAccessType,
    ParamValueType,
    PayloadSARState,
    PayloadSecurity,
    SessionConfig,
    STOMPVersion,
    ValueChangeType,
    decode_msg,
    decode_record,
    encode_msg,
    encode_record,
    get_err_msg,
)
from usp.builder import (
    AddBuilder,
    AddOperationStatus,
    AddRespBuilder,
    AddRespParameterError,
    CreatedObjectResultsBuilder,
    CreateObjectBuilder,
    CurrInstanceBuilder,
    DeleteBuilder,
    DeletedObjectResultsBuilder,
    DeleteRespBuilder,
    DeleteRespUnaffectedPathError,
    DeregisterBuilder,
    DeregisteredPathResultBuilder,
    DeregisterRespBuilder,
    ErrorBuilder,
    GetBuilder,
    GetInstancesBuilder,
    GetInstancesRespBuilder,
    GetInstancesRespReqPathResultBuilder,
    GetReqPathResultBuilder,
    GetRespBuilder,
    GetSupportedDMBuilder,
    GetSupportedDMRespBuilder,
    GetSupportedProtocolBuilder,
    GetSupportedProtocolRespBuilder,
    GSDMCommandResult,
    GSDMEventResult,
    GSDMParamResult,
    GSDMReqObjectResultBuilder,
    GSDMSupportedObjectResultBuilder,
    MsgBuilder,
    NotifyBuilder,
    NotifyRespBuilder,
    OperateBuilder,
    OperateRespBuilder,
    OperateRespResultBuilder,
    RecordBuilder,
    RegisterBuilder,
    RegisteredPathResultBuilder,
    RegisterRespBuilder,
    ResolvedPathResultBuilder,
    SessionContextBuilder,
    SetBuilder,
    SetOperationStatus,
    SetOperationSuccessBuilder,
    SetRespBuilder,
    SetRespParameterError,
    UpdatedInstanceFailureBuilder,
    UpdatedObjectResultsBuilder,
    UpdateObjectBuilder,
    msg_type_for,
)
from usp.msg import Body, Error, Msg, Notify, OperateResp, Request, Response
from usp.record import (
    DisconnectRecord,
    NoSessionContextRecord,
    SessionContextRecord,
    STOMPConnectRecord,
    UDSConnectRecord,
    WebSocketConnectRecord,
)


def _routed_record() -> RecordBuilder:
    return RecordBuilder().with_to_id("proto::agent").with_from_id("proto::controller")


def _roundtrip(body: Body, msg_id: str = "id") -> Msg:
    msg = MsgBuilder().with_msg_id(msg_id).with_body(body).build()
    decoded = decode_msg(encode_msg(msg))
    assert decoded == msg
    return decoded


# ----------------------------------------------------------------------------
# Msg
# ----------------------------------------------------------------------------


def test_msg_builder_requires_id_and_body() -> None:
    """Test that MsgBuilder reports missing parts."""
    with pytest.raises(BuilderError, match="without msg_id"):
        MsgBuilder().with_body(GetBuilder().build()).build()
    with pytest.raises(BuilderError, match="without msg_body"):
        MsgBuilder().with_msg_id("x").build()


def test_msg_type_follows_body() -> None:
    """Test that the header type is derived from the body."""
    cases = [
        (GetBuilder().build(), MsgType.GET),
        (GetRespBuilder().build(), MsgType.GET_RESP),
        (NotifyBuilder("s").with_object_deletion("Device.X.1.").build(), MsgType.NOTIFY),
        (NotifyRespBuilder("s").build(), MsgType.NOTIFY_RESP),
        (SetBuilder().build(), MsgType.SET),
        (OperateBuilder("Device.Reboot()").build(), MsgType.OPERATE),
        (AddBuilder().build(), MsgType.ADD),
        (DeleteRespBuilder().build(), MsgType.DELETE_RESP),
        (GetSupportedDMBuilder().build(), MsgType.GET_SUPPORTED_DM),
        (GetInstancesRespBuilder().build(), MsgType.GET_INSTANCES_RESP),
        (GetSupportedProtocolBuilder("1.3").build(), MsgType.GET_SUPPORTED_PROTO),
        (GetSupportedProtocolRespBuilder("1.3").build(), MsgType.GET_SUPPORTED_PROTO_RESP),
        (RegisterBuilder().build(), MsgType.REGISTER),
        (DeregisterRespBuilder().build(), MsgType.DEREGISTER_RESP),
        (ErrorBuilder().set_err(7000).build(), MsgType.ERROR),
    ]
    for body, msg_type in cases:
        assert msg_type_for(body) == msg_type
        assert MsgBuilder().with_msg_id("id").with_body(body).build().msg_type == msg_type

    assert msg_type_for(Body()) == MsgType.ERROR
    assert msg_type_for(Body(msg_body=Request())) == MsgType.ERROR


# ----------------------------------------------------------------------------
# Error
# ----------------------------------------------------------------------------


def test_error_builder_defaults_message() -> None:
    """Test that a missing or empty error text falls back to the table."""
    body = ErrorBuilder().set_err(7004).build()
    assert body.msg_body == Error(err_code=7004, err_msg=get_err_msg(7004))
    assert body.msg_body.err_msg != ""

    body = ErrorBuilder().set_err(7004, "").build()
    assert body.msg_body.err_msg == get_err_msg(7004)

    body = ErrorBuilder().set_err(7850, "custom").with_param_errs([("Device.X", 7012, "bad")]).build()
    assert body.msg_body.err_msg == "custom"
    assert body.msg_body.param_errs == [Error.ParamError(param_path="Device.X", err_code=7012, err_msg="bad")]

    assert ErrorBuilder().build().msg_body == Error()
    _roundtrip(body)


def test_error_text_table() -> None:
    """Test canned error texts."""
    assert get_err_msg(7000) == "Message failed"
    assert get_err_msg(7800) == "Vendor specific"
    assert get_err_msg(7999) == "Vendor specific"
    assert get_err_msg(1234) == ""


# ----------------------------------------------------------------------------
# Get and GetInstances
# ----------------------------------------------------------------------------


def test_get_resp_builder() -> None:
    """Test GetResp with resolved results and a failed path."""
    body = (
        GetRespBuilder()
        .with_req_path_results(
            [
                GetReqPathResultBuilder("Device.DeviceInfo.").with_res_path_results(
                    [
                        ResolvedPathResultBuilder("Device.DeviceInfo.").with_result_params(
                            [("Manufacturer", "ACME"), ("ModelName", "X1")]
                        )
                    ]
                ),
                GetReqPathResultBuilder("Device.Nope.").set_err(7026),
            ]
        )
        .build()
    )
    resp = _roundtrip(body).body.msg_body.resp_type
    ok, failed = resp.req_path_results
    assert ok.err_code == 0
    assert ok.err_msg == ""
    assert ok.resolved_path_results[0].result_params == {"Manufacturer": "ACME", "ModelName": "X1"}
    assert failed.err_code == 7026
    assert failed.err_msg == get_err_msg(7026)


def test_get_instances_builders() -> None:
    """Test GetInstances requests and responses."""
    body = GetInstancesBuilder().with_obj_paths(["Device.IP.Interface."]).with_first_level_only(True).build()
    req = _roundtrip(body).body.msg_body.req_type
    assert req.obj_paths == ["Device.IP.Interface."]
    assert req.first_level_only is True

    body = (
        GetInstancesRespBuilder()
        .with_req_path_results(
            [
                GetInstancesRespReqPathResultBuilder("Device.IP.Interface.").with_curr_insts(
                    [CurrInstanceBuilder("Device.IP.Interface.1.").with_unique_keys({"Name": "eth0"})]
                )
            ]
        )
        .build()
    )
    resp = _roundtrip(body).body.msg_body.resp_type
    inst = resp.req_path_results[0].curr_insts[0]
    assert inst.instantiated_obj_path == "Device.IP.Interface.1."
    assert inst.unique_keys == {"Name": "eth0"}


# ----------------------------------------------------------------------------
# Add, Set and Delete
# ----------------------------------------------------------------------------


def test_add_builders() -> None:
    """Test Add requests and AddResp results."""
    body = (
        AddBuilder()
        .with_allow_partial(True)
        .with_create_objs([CreateObjectBuilder("Device.Foo.").with_param_settings([("Alias", "a", True)])])
        .build()
    )
    req = _roundtrip(body).body.msg_body.req_type
    assert req.allow_partial is True
    assert req.create_objs[0].param_settings[0].required is True

    success = AddOperationStatus().set_success(
        "Device.Foo.2.",
        param_errs=[AddRespParameterError(param="Device.Foo.2.Alias", err_code=7012)],
        unique_keys={"Alias": "a"},
    )
    failure = AddOperationStatus().set_failure(7018)
    body = (
        AddRespBuilder()
        .with_created_obj_results(
            [CreatedObjectResultsBuilder("Device.Foo.", success), CreatedObjectResultsBuilder("Device.Bar.", failure)]
        )
        .build()
    )
    resp = _roundtrip(body).body.msg_body.resp_type
    created, failed = resp.created_obj_results
    assert created.oper_status.which("oper_status") == "oper_success"
    assert created.oper_status.oper_status.param_errs[0].err_msg == get_err_msg(7012)
    assert created.oper_status.oper_status.unique_keys == {"Alias": "a"}
    assert failed.oper_status.which("oper_status") == "oper_failure"
    assert failed.oper_status.oper_status.err_code == 7018

    with pytest.raises(BuilderError):
        AddRespBuilder().with_created_obj_results(
            [CreatedObjectResultsBuilder("Device.Foo.", AddOperationStatus())]
        ).build()


def test_parameter_error_validation() -> None:
    """Test that parameter errors reject codes outside uint32."""
    with pytest.raises(ValidationError):
        AddRespParameterError(param="Device.X", err_code=-1)
    with pytest.raises(ValidationError):
        SetRespParameterError(param="Device.X", err_code=1 << 32)
    with pytest.raises(ValidationError):
        DeleteRespUnaffectedPathError(unaffected_path="Device.X.1.")


def test_set_builders() -> None:
    """Test Set requests and SetResp success and failure."""
    body = (
        SetBuilder()
        .with_update_objs([UpdateObjectBuilder("Device.X.1.").with_param_settings([("Enable", "true", False)])])
        .build()
    )
    req = _roundtrip(body).body.msg_body.req_type
    assert req.update_objs[0].param_settings[0].value == "true"

    success = SetOperationStatus().set_success(
        [
            SetOperationSuccessBuilder("Device.X.1.")
            .with_updated_params({"Enable": "true"})
            .with_param_errs([SetRespParameterError(param="Device.X.1.Name", err_code=7013, err_msg="nope")])
        ]
    )
    failure = SetOperationStatus().set_failure(
        7004,
        updated_inst_failures=[
            UpdatedInstanceFailureBuilder("Device.Y.1.").with_param_errs(
                [SetRespParameterError(param="Device.Y.1.Enable", err_code=7004)]
            )
        ],
    )
    body = (
        SetRespBuilder()
        .with_updated_obj_results(
            [UpdatedObjectResultsBuilder("Device.X.", success), UpdatedObjectResultsBuilder("Device.Y.", failure)]
        )
        .build()
    )
    resp = _roundtrip(body).body.msg_body.resp_type
    updated, failed = resp.updated_obj_results
    instance = updated.oper_status.oper_status.updated_inst_results[0]
    assert instance.updated_params == {"Enable": "true"}
    assert instance.param_errs[0].err_msg == "nope"
    failure_status = failed.oper_status.oper_status
    assert failure_status.err_msg == get_err_msg(7004)
    assert failure_status.updated_inst_failures[0].affected_path == "Device.Y.1."

    with pytest.raises(BuilderError, match="without failure or success"):
        SetOperationStatus().build()

    # The last call decides the outcome
    status = SetOperationStatus().set_failure(7004).set_success([]).build()
    assert status.which("oper_status") == "oper_success"


def test_delete_builders() -> None:
    """Test Delete requests and DeleteResp results."""
    body = DeleteBuilder().with_allow_partial(True).with_obj_paths(["Device.X.1.", "Device.X.2."]).build()
    req = _roundtrip(body).body.msg_body.req_type
    assert req.obj_paths == ["Device.X.1.", "Device.X.2."]

    body = (
        DeleteRespBuilder()
        .with_deleted_obj_results(
            [
                DeletedObjectResultsBuilder("Device.X.").set_success(
                    ["Device.X.1."],
                    [DeleteRespUnaffectedPathError(unaffected_path="Device.X.2.", err_code=7015)],
                ),
                DeletedObjectResultsBuilder("Device.Y.").set_failure(7016, "locked"),
            ]
        )
        .build()
    )
    resp = _roundtrip(body).body.msg_body.resp_type
    deleted, failed = resp.deleted_obj_results
    success = deleted.oper_status.oper_status
    assert success.affected_paths == ["Device.X.1."]
    assert success.unaffected_path_errs[0].err_msg == get_err_msg(7015)
    assert failed.oper_status.oper_status.err_msg == "locked"

    with pytest.raises(BuilderError, match="Device.Z."):
        DeletedObjectResultsBuilder("Device.Z.").build()


# ----------------------------------------------------------------------------
# Operate and Notify
# ----------------------------------------------------------------------------


def test_operate_builders() -> None:
    """Test Operate requests and every OperateResp outcome."""
    body = (
        OperateBuilder("Device.LocalAgent.Controller.1.SendOnBoardRequest()")
        .with_command_key("key")
        .with_send_resp(True)
        .with_input_args({"Arg": "1"})
        .build()
    )
    req = _roundtrip(body).body.msg_body.req_type
    assert req.command_key == "key"
    assert req.send_resp is True
    assert req.input_args == {"Arg": "1"}

    body = (
        OperateRespBuilder()
        .with_operation_results(
            [
                OperateRespResultBuilder("Device.A()").set_output_args({"Out": "ok"}),
                OperateRespResultBuilder("Device.B()").set_path("Device.LocalAgent.Request.1."),
                OperateRespResultBuilder("Device.C()").set_failure(7022),
            ]
        )
        .build()
    )
    results = _roundtrip(body).body.msg_body.resp_type.operation_results
    assert [result.which("operation_resp") for result in results] == [
        "req_output_args",
        "req_obj_path",
        "cmd_failure",
    ]
    assert results[0].operation_resp == OperateResp.OperationResult.OutputArgs(output_args={"Out": "ok"})
    assert results[1].operation_resp == "Device.LocalAgent.Request.1."
    assert results[2].operation_resp.err_msg == get_err_msg(7022)

    with pytest.raises(BuilderError, match="Need to have either OutputArgs or Path or Failure"):
        OperateRespResultBuilder("Device.D()").build()


def test_notify_builders() -> None:
    """Test each notification kind."""
    builders = {
        "event": NotifyBuilder("sub").with_event("Device.", "Boot!", {"Cause": "LocalReboot"}),
        "value_change": NotifyBuilder("sub").with_value_change("Device.X.Enable", "true"),
        "obj_creation": NotifyBuilder("sub").with_object_creation("Device.X.3.", {"Alias": "c"}),
        "obj_deletion": NotifyBuilder("sub").with_object_deletion("Device.X.3."),
        "oper_complete": NotifyBuilder("sub").with_operation_complete_output_args(
            "Device.", "Reboot()", "k", {"Status": "done"}
        ),
        "on_board_req": NotifyBuilder("sub").with_onboard_request("0044FF", "Foo", "01234", "1.3"),
    }
    for variant, builder in builders.items():
        msg = _roundtrip(builder.with_send_resp(True).build())
        notify = msg.get_notify_request()
        assert notify.which("notification") == variant
        assert notify.send_resp is True

    body = NotifyBuilder("sub").with_operation_complete_cmd_failure("Device.", "Reboot()", "k", 7002).build()
    completion = _roundtrip(body).get_notify_request().notification
    assert isinstance(completion.operation_resp, Notify.OperationComplete.CommandFailure)
    assert completion.operation_resp.err_msg == get_err_msg(7002)

    with pytest.raises(BuilderError, match="Must specify a notification type"):
        NotifyBuilder("sub").build()

    resp = _roundtrip(NotifyRespBuilder("sub").build()).body.msg_body.resp_type
    assert resp.subscription_id == "sub"


# ----------------------------------------------------------------------------
# Register and Deregister
# ----------------------------------------------------------------------------


def test_register_builders() -> None:
    """Test Register requests and responses."""
    body = RegisterBuilder().with_allow_partial(True).with_reg_paths(["Device.Foo.", "Device.Bar."]).build()
    req = _roundtrip(body).body.msg_body.req_type
    assert [reg_path.path for reg_path in req.reg_paths] == ["Device.Foo.", "Device.Bar."]

    body = (
        RegisterRespBuilder()
        .with_registered_path_results(
            [
                RegisteredPathResultBuilder("Device.Foo.").set_success("Device.Foo."),
                RegisteredPathResultBuilder("Device.Bar.").set_failure(7029),
            ]
        )
        .build()
    )
    results = _roundtrip(body).body.msg_body.resp_type.registered_path_results
    assert results[0].oper_status.oper_status.registered_path == "Device.Foo."
    assert results[1].oper_status.oper_status.err_code == 7029

    with pytest.raises(BuilderError):
        RegisteredPathResultBuilder("Device.Baz.").build()


def test_deregister_builders() -> None:
    """Test Deregister requests and responses."""
    body = DeregisterBuilder().with_paths(["Device.Foo."]).build()
    assert _roundtrip(body).body.msg_body.req_type.paths == ["Device.Foo."]

    body = (
        DeregisterRespBuilder()
        .with_deregistered_path_results(
            [
                DeregisteredPathResultBuilder("Device.Foo.").set_success(["Device.Foo.", "Device.Foo.Bar."]),
                DeregisteredPathResultBuilder("Device.Bar.").set_failure(7030, "not registered"),
            ]
        )
        .build()
    )
    results = _roundtrip(body).body.msg_body.resp_type.deregistered_path_results
    assert results[0].oper_status.oper_status.deregistered_path == ["Device.Foo.", "Device.Foo.Bar."]
    assert results[1].oper_status.oper_status.err_msg == "not registered"

    with pytest.raises(BuilderError):
        DeregisteredPathResultBuilder("Device.Baz.").build()


# ----------------------------------------------------------------------------
# GetSupportedDM and GetSupportedProtocol
# ----------------------------------------------------------------------------


def test_get_supported_dm_request_defaults() -> None:
    """Test that GetSupportedDM asks for everything by default."""
    req = GetSupportedDMBuilder().with_obj_paths(["Device."]).build().msg_body.req_type
    assert req.first_level_only is False
    assert req.return_commands and req.return_events and req.return_params and req.return_unique_key_sets

    req = GetSupportedDMBuilder().with_return_params(False).with_first_level_only(True).build().msg_body.req_type
    assert req.return_params is False
    assert req.first_level_only is True


def test_get_supported_dm_response() -> None:
    """Test a full supported data model description."""
    obj = (
        GSDMSupportedObjectResultBuilder("Device.IP.Interface.{i}.")
        .set_access_add_delete()
        .with_is_multi_instance(True)
        .with_supported_commands(
            [GSDMCommandResult("Reset()").set_async().with_input_arg_names(["Delay"]).with_output_arg_names(["Ok"])]
        )
        .with_supported_events([GSDMEventResult("Changed!").with_arg_names(["Reason"])])
        .with_supported_params(
            [
                GSDMParamResult("Enable").set_access_read_write().set_type_boolean().set_value_change_allowed(),
                GSDMParamResult("Name").set_type_string().set_value_change_will_ignore(),
            ]
        )
        .with_divergent_paths(["Device.IP.Interface.1."])
        .with_unique_key_sets([["Name"], ["Alias", "LowerLayers"]])
    )
    body = (
        GetSupportedDMRespBuilder()
        .with_req_obj_results(
            [
                GSDMReqObjectResultBuilder("Device.IP.")
                .with_data_model_inst_uri("urn:broadband-forum-org:tr-181-2-16-0")
                .with_supported_objs([obj]),
                GSDMReqObjectResultBuilder("Device.Nope.").set_err(7026),
            ]
        )
        .build()
    )
    resp = _roundtrip(body).body.msg_body.resp_type
    found, missing = resp.req_obj_results
    supported = found.supported_objs[0]
    assert supported.access == ObjAccessType.OBJ_ADD_DELETE
    assert supported.is_multi_instance is True
    assert supported.supported_commands[0].command_type == CmdType.CMD_ASYNC
    assert supported.supported_events[0].arg_names == ["Reason"]
    enable, name = supported.supported_params
    assert enable.access == ParamAccessType.PARAM_READ_WRITE
    assert enable.value_type == ParamValueType.PARAM_BOOLEAN
    assert enable.value_change == ValueChangeType.VALUE_CHANGE_ALLOWED
    assert name.access == ParamAccessType.PARAM_READ_ONLY
    assert name.value_change == ValueChangeType.VALUE_CHANGE_WILL_IGNORE
    assert [key_set.key_names for key_set in supported.unique_key_sets] == [["Name"], ["Alias", "LowerLayers"]]
    assert missing.err_code == 7026
    assert missing.err_msg == get_err_msg(7026)


def test_get_supported_dm_element_errors() -> None:
    """Test that commands and params need their type chosen."""
    assert GSDMSupportedObjectResultBuilder("Device.").build().access == ObjAccessType.OBJ_ADD_ONLY

    with pytest.raises(BuilderError, match="without a specified command type"):
        GSDMCommandResult("Reboot()").build()
    with pytest.raises(BuilderError, match="without a specified value type"):
        GSDMParamResult("Enable").set_value_change_allowed().build()
    with pytest.raises(BuilderError, match="value change"):
        GSDMParamResult("Enable").set_type_boolean().build()
    with pytest.raises(BuilderError):
        GSDMSupportedObjectResultBuilder("Device.").with_supported_params([GSDMParamResult("X")]).build()

    assert GSDMCommandResult("Reboot()").set_sync().build().command_type == CmdType.CMD_SYNC
    setters = [
        ("set_type_int", ParamValueType.PARAM_INT),
        ("set_type_unsigned_int", ParamValueType.PARAM_UNSIGNED_INT),
        ("set_type_long", ParamValueType.PARAM_LONG),
        ("set_type_unsigned_long", ParamValueType.PARAM_UNSIGNED_LONG),
        ("set_type_base64", ParamValueType.PARAM_BASE_64),
        ("set_type_hexbinary", ParamValueType.PARAM_HEX_BINARY),
        ("set_type_datetime", ParamValueType.PARAM_DATE_TIME),
        ("set_type_decimal", ParamValueType.PARAM_DECIMAL),
    ]
    for setter, value_type in setters:
        param = getattr(GSDMParamResult("P").set_access_write_only(), setter)().set_value_change_allowed().build()
        assert param.value_type == value_type
        assert param.access == ParamAccessType.PARAM_WRITE_ONLY


def test_get_supported_protocol_builders() -> None:
    """Test protocol version negotiation bodies."""
    req = _roundtrip(GetSupportedProtocolBuilder("1.0,1.3").build()).body.msg_body.req_type
    assert req.controller_supported_protocol_versions == "1.0,1.3"
    resp = _roundtrip(GetSupportedProtocolRespBuilder("1.3").build()).body.msg_body.resp_type
    assert resp.agent_supported_protocol_versions == "1.3"


# ----------------------------------------------------------------------------
# Records
# ----------------------------------------------------------------------------


def test_record_builder_requirements() -> None:
    """Test that RecordBuilder reports missing routing and type."""
    with pytest.raises(BuilderError, match="without to_id"):
        RecordBuilder().with_from_id("b").as_websocket_connect_record().build()
    with pytest.raises(BuilderError, match="without from_id"):
        RecordBuilder().with_to_id("a").as_websocket_connect_record().build()
    with pytest.raises(BuilderError, match="without type"):
        RecordBuilder().with_to_id("a").with_from_id("b").build()


def test_record_builder_types() -> None:
    """Test every record type and the envelope fields."""
    msg = MsgBuilder().with_msg_id("1").with_body(GetBuilder().with_params(["Device."]).build()).build()
    record = (
        _routed_record()
        .with_payload_security(PayloadSecurity.TLS12)
        .with_mac_signature(b"\x01\x02")
        .with_sender_cert(b"cert")
        .with_no_session_context_payload(msg)
        .build()
    )
    assert record.version == "1.3"
    decoded = decode_record(encode_record(record))
    assert decoded == record
    assert decoded.payload_security == PayloadSecurity.TLS12
    assert decoded.record_type == NoSessionContextRecord(payload=encode_msg(msg))

    assert isinstance(_routed_record().as_websocket_connect_record().build().record_type, WebSocketConnectRecord)
    assert isinstance(_routed_record().as_uds_connect_record().build().record_type, UDSConnectRecord)
    assert _routed_record().as_stomp_connect_record(STOMPVersion.V1_2, "/queue/agent").build().record_type == (
        STOMPConnectRecord(version=STOMPVersion.V1_2, subscribed_destination="/queue/agent")
    )
    assert _routed_record().as_disconnect_record("bye", 7003).build().record_type == DisconnectRecord(
        reason="bye", reason_code=7003
    )
    assert _routed_record().as_mqtt_connect_record("V3_1_1", "t").build().record_type.version == MQTTVersion.V3_1_1

    # Selecting another type replaces the previous one
    record = _routed_record().as_websocket_connect_record().with_no_session_context_payload_bytes(b"x").build()
    assert record.record_type == NoSessionContextRecord(payload=b"x")


def test_record_builder_versions() -> None:
    """Test version defaults and rejected MTP versions."""
    config = SessionConfig(record_version="1.4")
    record = RecordBuilder(config).with_to_id("a").with_from_id("b").as_uds_connect_record().build()
    assert record.version == "1.4"

    record = RecordBuilder(config).with_version("1.2").with_to_id("a").with_from_id("b").as_uds_connect_record()
    assert record.build().version == "1.2"

    with pytest.raises(BuilderError, match="MQTT version must be V3_1_1 or V5"):
        RecordBuilder().as_mqtt_connect_record("V4", "t")
    with pytest.raises(BuilderError, match="STOMP"):
        RecordBuilder().as_stomp_connect_record(5, "d")


def test_session_context_builder() -> None:
    """Test session context records built through RecordBuilder."""
    msg = MsgBuilder().with_msg_id("1").with_body(GetBuilder().with_params(["Device."]).build()).build()
    session = SessionContextBuilder().with_session_id(42).with_sequence_id(7).with_msg(msg)
    record = RecordBuilder().with_to_id("a").with_from_id("b").with_session_context_builder(session).build()

    context = record.record_type
    assert isinstance(context, SessionContextRecord)
    assert context.session_id == 42
    assert context.sequence_id == 7
    assert context.expected_id == 8
    assert context.payload_sar_state == PayloadSARState.NONE
    assert decode_msg(record.get_msg_payload()) == msg
    assert decode_record(encode_record(record)) == record

    context = (
        SessionContextBuilder()
        .with_session_id(1)
        .with_sequence_id(1)
        .with_expected_id(5)
        .with_retransmit_id(3)
        .with_payload_sar_state(PayloadSARState.BEGIN)
        .with_payloadrec_sar_state(PayloadSARState.BEGIN)
        .with_payload(b"ab")
        .with_payload(b"cd")
        .build()
    )
    assert context.payload == [b"ab", b"cd"]
    assert context.expected_id == 5
    assert context.retransmit_id == 3

    with pytest.raises(BuilderError, match="without session_id"):
        SessionContextBuilder().with_sequence_id(1).with_payload(b"x").build()
    with pytest.raises(BuilderError, match="without sequence_id"):
        SessionContextBuilder().with_session_id(1).with_payload(b"x").build()
    with pytest.raises(BuilderError, match="without payload"):
        SessionContextBuilder().with_session_id(1).with_sequence_id(1).build()

    with pytest.raises(BuilderError, match="without session_id"):
        RecordBuilder().with_to_id("a").with_from_id("b").with_session_context_builder(
            SessionContextBuilder()
        ).build()


def test_response_bodies_are_responses() -> None:
    """Test that response builders wrap their result in a Response."""
    assert isinstance(GetRespBuilder().build().msg_body, Response)
    assert isinstance(GetBuilder().build().msg_body, Request)

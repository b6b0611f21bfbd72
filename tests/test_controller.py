# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from tactile.controller import InputController, TextBuffer
from tactile.keypad.types import ModifierState


def test_insert_and_delete():
    buffer = TextBuffer("hello")
    controller = InputController(buffer)
    controller.insert(" world")
    controller.delete_backward()
    assert buffer.text == "hello worl"
    controller.delete_backward(4)
    assert buffer.text == "hello "


def test_delete_nothing():
    buffer = TextBuffer("abc")
    controller = InputController(buffer)
    controller.delete_backward(0)
    assert buffer.text == "abc"


def test_delete_past_start():
    buffer = TextBuffer("ab")
    InputController(buffer).delete_backward(5)
    assert buffer.text == ""


def test_replace():
    buffer = TextBuffer("le cafe")
    InputController(buffer).replace(4, "café")
    assert buffer.text == "le café"


def test_switch_to_next_input():
    buffer = TextBuffer()
    InputController(buffer).switch_to_next_input()
    assert buffer.input_mode_switches == 1


def test_detached_host_drops_edits():
    controller = InputController()
    controller.insert("x")
    controller.delete_backward(3)
    controller.switch_to_next_input()
    buffer = TextBuffer()
    controller.host = buffer
    controller.insert("x")
    assert buffer.text == "x"
    del buffer
    assert controller.host is None
    controller.insert("y")


def test_modifier_notifications_are_recorded():
    controller = InputController()
    controller.shift_state_changed(ModifierState.ON)
    controller.alt_state_changed(ModifierState.ON)
    assert controller.shift_state is ModifierState.ON
    assert controller.alt_state is ModifierState.ON

"""
C++ message wrapper generators (notifications.h and requests.h).
Each method gets a named string constant and a wrapper struct parameterized by it.
"""
from typing import Iterable, Optional

from generators.cpp_generator import CppGeneratorBase
from generators.generator_utils import DEFAULT_METHOD_PREFIXES, NULL_TYPE, method_to_name
from generators.property_materializer import PropertyMaterializer
from spec_model import Notification, Request


class CppMessagesGeneratorBase(CppGeneratorBase):
    def __init__(self, model, options=None):
        super().__init__(model, options)
        self.materializer = PropertyMaterializer(model.root_types())

    @property
    def method_prefixes(self) -> Iterable[str]:
        return self.options.get('method_prefixes') or DEFAULT_METHOD_PREFIXES

    def message_name(self, method: str) -> str:
        return method_to_name(method, self.method_prefixes)

    def render_reference(self, type_text: Optional[str]) -> str:
        """Params, result and error types; absent ones become std::nullptr_t."""
        if not type_text:
            return NULL_TYPE
        return self.materializer.render_type(type_text)


class CppNotificationsGenerator(CppMessagesGeneratorBase):
    filename = "notifications.h"
    includes = ['"notificationmessage.h"', '"types.h"']

    def generate_declarations(self) -> str:
        return ''.join(self.write_notification(n) for n in self.model.notifications)

    def write_notification(self, notification: Notification) -> str:
        name = self.message_name(notification.method)
        params = self.render_reference(notification.params)
        return (f"\ninline constexpr char {name}Name[] = \"{notification.method}\";\n"
                f"struct {name}Notification : public NotificationMessage<{name}Name, {params}>\n{{}};\n")


class CppRequestsGenerator(CppMessagesGeneratorBase):
    filename = "requests.h"
    includes = ['"requestmessage.h"', '"types.h"']

    def generate_declarations(self) -> str:
        return ''.join(self.write_request(r) for r in self.model.requests)

    def write_request(self, request: Request) -> str:
        name = self.message_name(request.method)
        params = self.render_reference(request.params)
        result = self.render_reference(request.result)
        error = self.render_reference(request.error)
        return (f"\ninline constexpr char {name}Name[] = \"{request.method}\";\n"
                f"struct {name}Request : public RequestMessage<{name}Name, {params}, {result}, {error}>\n{{}};\n")

from pageloader.models import Direction, InfoLoadRequest, LoadRequest


class TestLoadRequest:
    def test_next_page(self):
        request = LoadRequest.next_page([1, 2])

        assert request.direction is Direction.NEXT
        assert request.is_next
        assert not request.is_previous
        assert request.current == (1, 2)

    def test_previous_page(self):
        request = LoadRequest.previous_page((3,))

        assert request.direction is Direction.PREVIOUS
        assert request.is_previous
        assert not request.is_next
        assert request.current == (3,)


class TestInfoLoadRequest:
    def test_carries_info(self):
        request = InfoLoadRequest.next_page([1], info="cursor-1")

        assert request.is_next
        assert request.current == (1,)
        assert request.info == "cursor-1"

    def test_load_request_drops_info(self):
        request = InfoLoadRequest.previous_page([1, 2], info={"before": 1})

        plain = request.load_request

        assert type(plain) is LoadRequest
        assert plain == LoadRequest.previous_page([1, 2])

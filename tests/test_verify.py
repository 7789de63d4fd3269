import pytest
from unittest.mock import patch

from grinpow import EdgeBits, InvalidParameterError, InvalidSolutionError, VerifyCode, verify, verify_code
from grinpow.mining.cuckaroo import verify_cuckaroo
from grinpow.mining.cuckatoo import verify_cuckatoo
from grinpow.mining.cycle import follow_cycle


def exact(a, b):
    return a == b


def pair(a, b):
    return a >> 1 == b >> 1


class TestFollowCycle:
    def test_four_cycle(self):
        # edges (a,x) (a,y) (b,y) (b,x)
        uvs = [10, 20, 10, 30, 40, 30, 40, 20]
        assert follow_cycle(uvs, exact, proof_size=4) is VerifyCode.POW_OK

    def test_short_cycle(self):
        uvs = [10, 20, 10, 30, 40, 30, 40, 20, 50, 60, 70, 80]
        assert follow_cycle(uvs, exact, proof_size=6) is VerifyCode.POW_SHORT_CYCLE

    def test_branch(self):
        uvs = [10, 20, 10, 30, 10, 40, 50, 60]
        assert follow_cycle(uvs, exact, proof_size=4) is VerifyCode.POW_BRANCH

    def test_dead_end(self):
        uvs = [10, 20, 11, 30, 40, 30, 40, 20]
        assert follow_cycle(uvs, exact, proof_size=4) is VerifyCode.POW_DEAD_END

    def test_paired_nodes(self):
        # cuckatoo matches endpoints that differ only in the lowest bit
        uvs = [10, 20, 11, 30, 40, 31, 41, 21]
        assert follow_cycle(uvs, pair, reject_identical=True, proof_size=4) is VerifyCode.POW_OK

    def test_paired_identical_is_dead_end(self):
        uvs = [10, 20, 10, 30, 40, 31, 41, 21]
        assert follow_cycle(uvs, pair, reject_identical=True, proof_size=4) is VerifyCode.POW_DEAD_END


class TestCuckatoo:
    def test_non_increasing_edges(self, sample_header):
        assert verify_cuckatoo(sample_header, [0] * 42) is VerifyCode.POW_TOO_SMALL
        edges = list(range(42))
        edges[10], edges[11] = edges[11], edges[10]
        assert verify_cuckatoo(sample_header, edges) is VerifyCode.POW_TOO_SMALL

    def test_edge_above_mask(self, sample_header):
        edges = list(range(41)) + [1 << 31]
        assert verify_cuckatoo(sample_header, edges) is VerifyCode.POW_TOO_BIG

    def test_largest_edge_is_allowed(self, sample_header):
        edges = list(range(41)) + [(1 << 31) - 1]
        assert verify_cuckatoo(sample_header, edges) is VerifyCode.POW_NON_MATCHING

    def test_random_edges_do_not_match(self, sample_header, sample_solution):
        assert verify_cuckatoo(sample_header, sample_solution) is VerifyCode.POW_NON_MATCHING

    def test_header_must_be_bytes(self, sample_solution):
        with pytest.raises(TypeError):
            verify_cuckatoo("not bytes", sample_solution)


class TestCuckaroo:
    def test_non_increasing_edges(self, sample_header):
        assert verify_cuckaroo(sample_header, [5] * 42) is VerifyCode.POW_TOO_SMALL

    def test_edge_above_mask(self, sample_header):
        edges = [1 << 29] + list(range(41))
        assert verify_cuckaroo(sample_header, edges) is VerifyCode.POW_TOO_BIG

    def test_random_edges_do_not_match(self, sample_header, sample_solution):
        assert verify_cuckaroo(bytearray(sample_header), sample_solution) is VerifyCode.POW_NON_MATCHING


class TestDispatch:
    @patch('grinpow.api.verify_cuckaroo')
    @patch('grinpow.api.verify_cuckatoo')
    def test_routes_by_edge_bits(self, mock_c31, mock_c29, sample_header, sample_solution):
        mock_c31.return_value = VerifyCode.POW_OK
        mock_c29.return_value = VerifyCode.POW_BRANCH

        assert verify(sample_header, sample_solution, 31) is True
        mock_c31.assert_called_once_with(sample_header, sample_solution)
        mock_c29.assert_not_called()

        assert verify(sample_header, sample_solution, EdgeBits.CUCKAROO29) is False
        mock_c29.assert_called_once_with(sample_header, sample_solution)
        assert verify_code(sample_header, sample_solution, 29) is VerifyCode.POW_BRANCH

    @pytest.mark.parametrize("bits", [30, 32, 0, -31, True, "29", None])
    def test_unknown_edge_bits(self, bits, sample_header, sample_solution):
        with patch('grinpow.api.verify_cuckatoo') as mock_c31, patch('grinpow.api.verify_cuckaroo') as mock_c29:
            with pytest.raises(InvalidParameterError) as excinfo:
                verify(sample_header, sample_solution, bits)
            mock_c31.assert_not_called()
            mock_c29.assert_not_called()
        assert excinfo.value.edge_bits == bits

    def test_real_verifiers_reject_bad_proof(self, sample_header, sample_solution):
        assert verify(sample_header, sample_solution, 31) is False
        assert verify(sample_header, sample_solution, 29) is False
        assert verify_code(sample_header, sample_solution, 31) is VerifyCode.POW_NON_MATCHING

    def test_wrong_proof_length(self, sample_header):
        with pytest.raises(InvalidSolutionError):
            verify(sample_header, list(range(41)), 31)
        with pytest.raises(InvalidSolutionError):
            verify(sample_header, list(range(43)), 29)


def _cycle_endpoints(paired=False):
    """
    Endpoints of a 42-cycle where edge 2m and 2m+1 share a u node and edge
    2m+1 and 2m+2 share a v node. With ``paired`` the shared nodes differ in
    the lowest bit, as cuckatoo node pairs do.
    """
    uvs = [0] * 84
    for m in range(21):
        u = 100 + m
        v = 200 + m
        if paired:
            uvs[4 * m] = 2 * u
            uvs[4 * m + 2] = 2 * u + 1
            uvs[4 * m + 3] = 2 * v
            uvs[(4 * m + 5) % 84] = 2 * v + 1
        else:
            uvs[4 * m] = uvs[4 * m + 2] = u
            uvs[4 * m + 3] = uvs[(4 * m + 5) % 84] = v
    return uvs


class TestFullCycle:
    @patch('grinpow.mining.cuckaroo.edge_endpoints')
    def test_cuckaroo_accepts_cycle(self, mock_endpoints, sample_header, sample_solution):
        mock_endpoints.return_value = _cycle_endpoints()
        assert verify_cuckaroo(sample_header, sample_solution) is VerifyCode.POW_OK
        assert mock_endpoints.call_args[0][1] == sample_solution

    @patch('grinpow.mining.cuckatoo.edge_endpoints')
    def test_cuckatoo_accepts_cycle(self, mock_endpoints, sample_header, sample_solution):
        mock_endpoints.return_value = _cycle_endpoints(paired=True)
        assert verify_cuckatoo(sample_header, sample_solution) is VerifyCode.POW_OK

    @patch('grinpow.mining.cuckatoo.edge_endpoints')
    @patch('grinpow.mining.cuckaroo.edge_endpoints')
    def test_xor_seed_differs_per_variant(self, mock_c29, mock_c31, sample_header, sample_solution):
        # 21 node pairs xor to 1, which only cuckatoo's seed cancels
        mock_c29.return_value = _cycle_endpoints(paired=True)
        mock_c31.return_value = _cycle_endpoints()
        assert verify_cuckaroo(sample_header, sample_solution) is VerifyCode.POW_NON_MATCHING
        assert verify_cuckatoo(sample_header, sample_solution) is VerifyCode.POW_NON_MATCHING

    @patch('grinpow.mining.cuckatoo.edge_endpoints')
    @patch('grinpow.mining.cuckaroo.edge_endpoints')
    def test_verify_through_dispatch(self, mock_c29, mock_c31, sample_header, sample_solution):
        mock_c29.return_value = _cycle_endpoints()
        mock_c31.return_value = _cycle_endpoints(paired=True)
        assert verify(sample_header, sample_solution, 29) is True
        assert verify(sample_header, sample_solution, EdgeBits.CUCKATOO31) is True

    @patch('grinpow.mining.cuckaroo.edge_endpoints')
    def test_broken_cycle(self, mock_endpoints, sample_header, sample_solution):
        uvs = _cycle_endpoints()
        # split the v node shared by edges 1 and 2 without changing the xor
        uvs[3] ^= 1 << 20
        uvs[1] ^= 1 << 20
        mock_endpoints.return_value = uvs
        assert verify_cuckaroo(sample_header, sample_solution) is VerifyCode.POW_DEAD_END

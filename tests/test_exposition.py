"""Tests for the metric model and exposition writer"""
from metrics.exposition import MetricWriter
from metrics.models import MetricSample, MetricType, format_labels, format_value


class TestMetricSample:
    """Test single sample rendering"""

    def test_line_without_labels(self):
        """Test samples without labels have no braces"""
        sample = MetricSample(name="node_load1", value="0.10")

        assert sample.to_prometheus_line() == "node_load1 0.10"

    def test_line_with_labels(self):
        """Test labels keep their insertion order"""
        sample = MetricSample(
            name="node_cpu",
            value=1.5,
            labels={"cpu": "cpu0", "mode": "user"},
            metric_type=MetricType.COUNTER,
        )

        assert sample.to_prometheus_line() == 'node_cpu{cpu="cpu0",mode="user"} 1.5'

    def test_none_labels(self):
        """Test None labels are normalised to an empty mapping"""
        sample = MetricSample(name="node_time", value=1, labels=None)

        assert sample.labels == {}

    def test_format_value(self):
        """Test values render verbatim"""
        assert format_value("0.10") == "0.10"
        assert format_value(3) == "3"
        assert format_value(0.5) == "0.5"
        assert format_value(True) == "1"

    def test_format_labels(self):
        """Test label set rendering"""
        assert format_labels({}) == ""
        assert format_labels({"device": "eth0"}) == '{device="eth0"}'


class TestMetricWriter:
    """Test streaming family output"""

    def setup_method(self):
        """Setup test fixtures"""
        self.lines = []
        self.writer = MetricWriter(self.lines.append)

    def test_begin_family_writes_header(self):
        """Test the TYPE header is written immediately"""
        self.writer.begin_family("node_cpu", MetricType.COUNTER)

        assert self.lines == ["# TYPE node_cpu counter\n"]

    def test_emitter_writes_samples(self):
        """Test the returned emitter writes samples for its family"""
        emit = self.writer.begin_family("node_network_receive_bytes", MetricType.GAUGE)
        emit({"device": "lo"}, "10")
        emit({"device": "eth0"}, "20")

        assert "".join(self.lines) == (
            "# TYPE node_network_receive_bytes gauge\n"
            'node_network_receive_bytes{device="lo"} 10\n'
            'node_network_receive_bytes{device="eth0"} 20\n'
        )
        assert self.writer.sample_count == 2

    def test_header_written_once(self):
        """Test a family header is never repeated"""
        self.writer.begin_family("node_load1", MetricType.GAUGE)
        self.writer.begin_family("node_load1", MetricType.GAUGE)

        assert self.lines.count("# TYPE node_load1 gauge\n") == 1
        assert self.writer.family_count == 1

    def test_metric_with_value(self):
        """Test metric() writes header and sample"""
        self.writer.metric("node_load1", MetricType.GAUGE, None, "0.10")

        assert "".join(self.lines) == "# TYPE node_load1 gauge\nnode_load1 0.10\n"

    def test_absent_value_skipped(self):
        """Test a None value never produces a sample line"""
        self.writer.metric("node_boot_time", MetricType.GAUGE, None, None)
        self.writer.sample("node_boot_time", None, None)

        assert self.lines == ["# TYPE node_boot_time gauge\n"]
        assert self.writer.sample_count == 0

    def test_labels_copied(self):
        """Test reusing a labels dict does not alter written samples"""
        emit = self.writer.begin_family("node_cpu", MetricType.COUNTER)
        labels = {"cpu": "cpu0", "mode": "user"}
        emit(labels, 1.0)
        labels["mode"] = "nice"
        emit(labels, 2.0)

        assert self.lines[1:] == [
            'node_cpu{cpu="cpu0",mode="user"} 1.0\n',
            'node_cpu{cpu="cpu0",mode="nice"} 2.0\n',
        ]

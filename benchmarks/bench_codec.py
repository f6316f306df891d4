#!/usr/bin/env python3
"""Benchmark: native field-table codec vs the protobuf runtime codec.

Measures **encode/decode throughput (MiB/s)** and **p99 latency (µs)** for a
GetResp Msg carrying a configurable number of parameters, wrapped in a
NoSessionContext Record. The decoded Record is compared against the
original on every run so a codec that loses data is reported.

Prerequisites
-------------
$ pip install -e ".[bench]"

Usage
-----
$ python benchmarks/bench_codec.py --runs 2000 --params 200
"""
from __future__ import annotations

import argparse
import time
from statistics import quantiles

from rich import box
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from usp import CodecID, Record, get_codec
from usp.builder import GetReqPathResultBuilder, GetRespBuilder, MsgBuilder, RecordBuilder, ResolvedPathResultBuilder

# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def build_record(params: int) -> Record:
    """Create a Record holding a GetResp with ``params`` parameters."""
    resolved = ResolvedPathResultBuilder("Device.DeviceInfo.").with_result_params(
        {f"Param{i}": f"value-{i:06d}" for i in range(params)}
    )
    requested = GetReqPathResultBuilder("Device.DeviceInfo.").with_res_path_results([resolved])
    body = GetRespBuilder().with_req_path_results([requested]).build()
    msg = MsgBuilder().with_msg_id("bench").with_body(body).build()
    return RecordBuilder().with_to_id("controller").with_from_id("agent").with_no_session_context_payload(msg).build()


def bench_codec(codec_id: CodecID, record: Record, runs: int) -> dict:
    codec = get_codec(codec_id)
    encode_latencies = []
    decode_latencies = []
    validation_errors = 0
    size = 0

    for run_num in tqdm(range(runs), desc=f"{codec.name} codec"):
        start = time.perf_counter()
        data = codec.encode(record)
        encode_latencies.append(time.perf_counter() - start)

        start = time.perf_counter()
        decoded = codec.decode(data, Record)
        decode_latencies.append(time.perf_counter() - start)

        if decoded != record:
            print(f"❌ Run {run_num}: decoded Record differs from the original")
            validation_errors += 1
        size = len(data)

    return {
        "encode": encode_latencies,
        "decode": decode_latencies,
        "size": size,
        "validation_errors": validation_errors,
        "total_runs": runs,
    }


def summarize(latencies: list[float], size: int) -> tuple[str, str]:
    """Return (throughput MiB/s, p99 µs) as display strings."""
    total = sum(latencies)
    throughput = (size * len(latencies)) / total / (1024 * 1024) if total else 0.0
    p99 = quantiles(latencies, n=100)[98] if len(latencies) >= 2 else latencies[0]
    return f"{throughput:,.1f}", f"{p99 * 1e6:,.1f}"


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    parser = argparse.ArgumentParser(description="Native vs protobuf USP codec benchmark")
    parser.add_argument("--runs", type=int, default=1000, help="Encode/decode iterations per codec")
    parser.add_argument("--params", type=int, default=100, help="Parameters in the GetResp payload")
    args = parser.parse_args()

    record = build_record(args.params)
    results = {codec_id: bench_codec(codec_id, record, args.runs) for codec_id in (CodecID.NATIVE, CodecID.PROTOBUF)}

    table = Table(title=f"USP codec benchmark ({args.runs} runs, {args.params} params)", box=box.SIMPLE_HEAVY)
    table.add_column("Codec")
    table.add_column("Bytes", justify="right")
    table.add_column("Encode MiB/s", justify="right")
    table.add_column("Encode p99 µs", justify="right")
    table.add_column("Decode MiB/s", justify="right")
    table.add_column("Decode p99 µs", justify="right")
    table.add_column("Errors", justify="right")

    for codec_id, result in results.items():
        encode_tp, encode_p99 = summarize(result["encode"], result["size"])
        decode_tp, decode_p99 = summarize(result["decode"], result["size"])
        table.add_row(
            get_codec(codec_id).name,
            str(result["size"]),
            encode_tp,
            encode_p99,
            decode_tp,
            decode_p99,
            f"{result['validation_errors']}/{result['total_runs']}",
        )

    Console().print(table)


if __name__ == "__main__":
    main()
